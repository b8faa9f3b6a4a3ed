from __future__ import annotations

import re
from typing import Callable, Iterator

from .lines import LineStream, open_lines
from .tokens import is_comment, split_line, validate_count
from ..error import IoReason, format_error, io_error

_UNSIGNED = re.compile(r"0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*")


def parse_unsigned(token: str) -> int | None:
    """Parse a C-style unsigned literal: hexadecimal 0x, octal with a leading 0, or decimal."""
    if _UNSIGNED.fullmatch(token) is None:
        return None
    if token[:2] in ("0x", "0X"):
        return int(token[2:], 16)
    if token.startswith("0"):
        return int(token, 8)
    return int(token)


def _data_rows(lines: LineStream, n_cols: int) -> Iterator[list[str]]:
    for line in lines:
        tokens = split_line(line)
        if is_comment(tokens):
            continue
        validate_count(tokens, n_cols, lines.path, lines.line_id)
        yield tokens
    if not lines.at_eof:
        raise io_error(
            lines.path, IoReason.CORRUPT_STREAM, "can't read the file up to the end"
        )


def _load_column(
    path: str, parse: Callable[[str, int], object], verbose: int
) -> list:
    items: list = []
    if path == "":
        return items
    if verbose > 0:
        print(f"load file {path} ...")
    seen: set = set()
    with open_lines(path) as lines:
        for tokens in _data_rows(lines, 1):
            value = parse(tokens[0], lines.line_id)
            if value not in seen:
                seen.add(value)
                items.append(value)
    if verbose > 0:
        print(f"items loaded: {len(items)}")
    return items


def load_one_column(path: str, verbose: int = 0) -> list[str]:
    return _load_column(path, lambda token, _line_id: token, verbose)


def load_one_column_numbers(path: str, verbose: int = 0) -> list[int]:
    def parse(token: str, line_id: int) -> int:
        value = parse_unsigned(token)
        if value is None:
            raise format_error(
                path, line_id, "expected a non-negative integer", actual=token
            )
        return value

    return _load_column(path, parse, verbose)


def load_two_column(path: str, verbose: int = 0) -> dict[str, str]:
    """Load ``key value`` pairs; the first occurrence of a key wins."""
    items: dict[str, str] = {}
    if path == "":
        return items
    if verbose > 0:
        print(f"load file {path} ...")
    with open_lines(path) as lines:
        for key, value in _data_rows(lines, 2):
            items.setdefault(key, value)
    if verbose > 0:
        print(f"items loaded: {len(items)}")
    return items
