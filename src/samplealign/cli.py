from __future__ import annotations

from .check import check_config
from .data.phenotypes import normalize_phenotype_file
from .error import AlignError, configuration_error
from .options.cli import QnormOptions, SamplesOptions, get_choice
from .options.config import dump_config, load_config, resolve_subgroups
from .report import write_sample_table
from .samples.alignment import load_samples


def run_samples(options: SamplesOptions) -> None:
    config = load_config(options.config_file)
    if options.out_file:
        config.files.out = options.out_file
    if options.verbose is not None:
        config.options.verbose = options.verbose
    check_config(config)
    if options.dry:
        print(dump_config(config), end="")
        return
    subgroups = resolve_subgroups(config)
    alignment = load_samples(subgroups, config.options.verbose)
    write_sample_table(config.files.out, alignment)
    if config.options.verbose > 0:
        print(f"Wrote sample table to {config.files.out}")


def run(argv: list[str] | None = None) -> None:
    choice = get_choice(argv)
    if isinstance(choice, SamplesOptions):
        run_samples(choice)
    elif isinstance(choice, QnormOptions):
        normalize_phenotype_file(choice.in_file, choice.out_file, choice.verbose)
    else:
        raise configuration_error("Unknown choice")


def main(argv: list[str] | None = None) -> None:
    try:
        run(argv)
        print("Done!")
    except AlignError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1) from exc
