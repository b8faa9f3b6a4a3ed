from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib
import tomli_w

from ..data.lists import load_one_column, load_two_column
from ..error import AlignError, ErrorKind, configuration_error
from ..samples.alignment import SubgroupFiles

DEFAULT_OUT_FILE = "samples.tsv"


@dataclass
class FilesConfig:
    out: str = DEFAULT_OUT_FILE
    subgroups: Optional[str] = None
    geno: Optional[str] = None
    pheno: Optional[str] = None


@dataclass
class SubgroupConfig:
    name: str
    geno: Optional[str] = None
    pheno: Optional[str] = None


@dataclass
class OptionsConfig:
    verbose: int = 1


@dataclass
class Config:
    files: FilesConfig
    options: OptionsConfig
    subgroups: list[SubgroupConfig] = field(default_factory=list)

    def uses_list_files(self) -> bool:
        return any(
            path is not None
            for path in (self.files.subgroups, self.files.geno, self.files.pheno)
        )


def _toml_error(message: str) -> AlignError:
    return AlignError(ErrorKind.TOML_DE, message)


def _subgroup_from_dict(item: dict) -> SubgroupConfig:
    if "name" not in item:
        raise _toml_error("Every [[subgroups]] entry needs a name.")
    return SubgroupConfig(
        name=str(item["name"]),
        geno=item.get("geno"),
        pheno=item.get("pheno"),
    )


def load_config(path: str) -> Config:
    try:
        with open(path, "rb") as handle:
            data = tomllib.load(handle)
    except Exception as exc:
        raise AlignError(ErrorKind.TOML_DE, str(exc), path=path) from exc

    files_data = data.get("files", {})
    files = FilesConfig(
        out=files_data.get("out", DEFAULT_OUT_FILE),
        subgroups=files_data.get("subgroups"),
        geno=files_data.get("geno"),
        pheno=files_data.get("pheno"),
    )
    options_data = data.get("options", {})
    try:
        verbose = int(options_data.get("verbose", 1))
    except (TypeError, ValueError) as exc:
        raise _toml_error(f"options.verbose must be an integer: {exc}") from exc
    subgroups = [_subgroup_from_dict(item) for item in data.get("subgroups", [])]
    return Config(
        files=files,
        options=OptionsConfig(verbose=verbose),
        subgroups=subgroups,
    )


def dump_config(config: Config) -> str:
    files = {"out": config.files.out}
    for key in ("subgroups", "geno", "pheno"):
        value = getattr(config.files, key)
        if value is not None:
            files[key] = value
    data: dict = {
        "files": files,
        "options": {"verbose": config.options.verbose},
    }
    if config.subgroups:
        data["subgroups"] = [
            {
                key: value
                for key, value in (
                    ("name", item.name),
                    ("geno", item.geno),
                    ("pheno", item.pheno),
                )
                if value is not None
            }
            for item in config.subgroups
        ]
    try:
        return tomli_w.dumps(data)
    except Exception as exc:
        raise AlignError(ErrorKind.TOML_SER, str(exc)) from exc


def resolve_subgroups(config: Config) -> list[SubgroupFiles]:
    """Return the subgroups to analyse, in declared order, with their files."""
    if not config.uses_list_files():
        return [
            SubgroupFiles(name=item.name, geno=str(item.geno), pheno=str(item.pheno))
            for item in config.subgroups
        ]

    verbose = config.options.verbose
    geno_paths = load_two_column(config.files.geno or "", verbose)
    pheno_paths = load_two_column(config.files.pheno or "", verbose)
    if config.files.subgroups:
        names = load_one_column(config.files.subgroups, verbose)
    else:
        if set(geno_paths) != set(pheno_paths):
            raise configuration_error(
                "Genotype list names subgroups [{}] but phenotype list names [{}].".format(
                    ", ".join(geno_paths), ", ".join(pheno_paths)
                )
            )
        names = list(pheno_paths)
    if not names:
        raise configuration_error("No subgroups specified.")
    resolved: list[SubgroupFiles] = []
    for name in names:
        if name not in geno_paths:
            raise configuration_error(f"Subgroup {name} has no genotype file.")
        if name not in pheno_paths:
            raise configuration_error(f"Subgroup {name} has no phenotype file.")
        resolved.append(SubgroupFiles(name=name, geno=geno_paths[name], pheno=pheno_paths[name]))
    return resolved
