from __future__ import annotations

import math
from pathlib import Path
from typing import TextIO

import numpy as np

from .headers import parse_phenotype_header
from .lines import LineStream, open_lines
from .tokens import is_comment, split_line, validate_count
from ..error import IoReason, format_error, io_error
from ..math_utils.transforms import quantile_normalize
from ..util.files import check_parent_dir_exists, open_output

MISSING_VALUE = "NA"


def _parse_values(tokens: list[str], path: str, line_id: int) -> np.ndarray:
    values = np.empty(len(tokens), dtype=float)
    for i, token in enumerate(tokens):
        if token == MISSING_VALUE:
            values[i] = math.nan
            continue
        try:
            values[i] = float(token)
        except ValueError as exc:
            raise format_error(path, line_id, "value is not a number", actual=token) from exc
        if not math.isfinite(values[i]):
            raise format_error(path, line_id, "value is not finite", actual=token)
    return values


def normalize_row(values: np.ndarray) -> np.ndarray:
    present = ~np.isnan(values)
    normalized = np.full(values.shape, math.nan)
    normalized[present] = quantile_normalize(values[present])
    return normalized


def _format_values(values: np.ndarray) -> list[str]:
    return [MISSING_VALUE if math.isnan(value) else repr(float(value)) for value in values]


def _write_normalized(lines: LineStream, out: TextIO) -> tuple[int, int]:
    header = next(lines, None)
    if header is None:
        raise format_error(lines.path, 1, "file is empty")
    samples = parse_phenotype_header(split_line(header), lines.path)
    out.write("\t".join(samples) + "\n")
    n_features = 0
    for line in lines:
        tokens = split_line(line)
        if is_comment(tokens):
            continue
        validate_count(tokens, len(samples) + 1, lines.path, lines.line_id)
        values = _parse_values(tokens[1:], lines.path, lines.line_id)
        out.write("\t".join([tokens[0]] + _format_values(normalize_row(values))) + "\n")
        n_features += 1
    if not lines.at_eof:
        raise io_error(
            lines.path, IoReason.CORRUPT_STREAM, "can't read the file up to the end"
        )
    return n_features, len(samples)


def normalize_phenotype_file(in_path: str, out_path: str, verbose: int = 0) -> int:
    """Quantile-normalize each feature of a phenotype file to a standard normal.

    Missing values stay missing; only the observed values of a row are ranked.
    Returns the number of features written. No output is left behind when the
    input turns out to be malformed.
    """
    check_parent_dir_exists(out_path)
    with open_lines(in_path) as lines:
        out = open_output(out_path)
        try:
            with out:
                n_features, n_samples = _write_normalized(lines, out)
        except Exception:
            Path(out_path).unlink(missing_ok=True)
            raise
    if verbose > 0:
        print(f"Normalized {n_features} features of {n_samples} samples")
    return n_features
