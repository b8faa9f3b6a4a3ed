from __future__ import annotations

from .error import configuration_error
from .options.config import Config
from .util.files import check_parent_dir_exists


def check_config(config: Config) -> None:
    if config.options.verbose < 0:
        raise configuration_error("options.verbose must be >= 0.")
    if config.uses_list_files():
        if config.subgroups:
            raise configuration_error(
                "Use either [[subgroups]] entries or files.geno/files.pheno lists, not both."
            )
        if not config.files.geno:
            raise configuration_error("Missing files.geno list of genotype files.")
        if not config.files.pheno:
            raise configuration_error("Missing files.pheno list of phenotype files.")
    else:
        if not config.subgroups:
            raise configuration_error("No subgroups specified.")
        seen: set[str] = set()
        for item in config.subgroups:
            if not item.name:
                raise configuration_error("Subgroup name cannot be empty.")
            if item.name in seen:
                raise configuration_error(f"Duplicate subgroup {item.name}.")
            seen.add(item.name)
            if not item.geno:
                raise configuration_error(f"Subgroup {item.name} has no genotype file.")
            if not item.pheno:
                raise configuration_error(f"Subgroup {item.name} has no phenotype file.")
    check_parent_dir_exists(config.files.out)
