from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional

from ..error import AlignError, configuration_error
from .action import Action


@dataclass
class SamplesOptions:
    config_file: str
    dry: bool
    out_file: Optional[str]
    verbose: Optional[int]


@dataclass
class QnormOptions:
    in_file: str
    out_file: str
    verbose: int


def _missing_option_error(name: str, long_opt: str, short_opt: str) -> AlignError:
    return configuration_error(f"Missing {name} option ('--{long_opt}' or '-{short_opt}').")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="samplealign")
    subparsers = parser.add_subparsers(dest="command", required=True)

    samples = subparsers.add_parser(
        Action.SAMPLES.value,
        help="Align the samples of all subgroups and write the sample table.",
    )
    samples.add_argument("-f", "--conf-file", dest="conf_file")
    samples.add_argument("-d", "--dry", action="store_true")
    samples.add_argument("-o", "--out-file", dest="out_file")
    samples.add_argument("-v", "--verbose", dest="verbose", type=int)

    qnorm = subparsers.add_parser(
        Action.QNORM.value,
        help="Quantile-normalize every feature of a phenotype file.",
    )
    qnorm.add_argument("-i", "--in-file", dest="in_file")
    qnorm.add_argument("-o", "--out-file", dest="out_file")
    qnorm.add_argument("-v", "--verbose", dest="verbose", type=int, default=1)

    return parser


def get_choice(argv: list[str] | None = None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == Action.SAMPLES.value:
        if not args.conf_file:
            raise _missing_option_error("config file", "conf-file", "f")
        return SamplesOptions(
            config_file=args.conf_file,
            dry=bool(args.dry),
            out_file=args.out_file,
            verbose=args.verbose,
        )

    if args.command == Action.QNORM.value:
        if not args.in_file:
            raise _missing_option_error("phenotype file", "in-file", "i")
        if not args.out_file:
            raise _missing_option_error("output file", "out-file", "o")
        return QnormOptions(
            in_file=args.in_file, out_file=args.out_file, verbose=args.verbose
        )

    raise configuration_error(f"Unknown subcommand {args.command}.")
