from __future__ import annotations

import re
from collections.abc import Collection
from functools import lru_cache

from ..error import format_error

DEFAULT_DELIMITERS = " \t,"
COMMENT_PREFIX = "#"


@lru_cache(maxsize=None)
def _splitter(delimiters: str) -> re.Pattern:
    return re.compile("[" + re.escape(delimiters) + "]+")


def split_line(line: str, delimiters: str = DEFAULT_DELIMITERS) -> list[str]:
    return [token for token in _splitter(delimiters).split(line) if token]


def is_comment(tokens: list[str]) -> bool:
    return bool(tokens) and tokens[0].startswith(COMMENT_PREFIX)


def validate_count(
    tokens: list[str],
    expected: int | Collection[int],
    path: str,
    line_id: int,
) -> None:
    allowed = (expected,) if isinstance(expected, int) else tuple(expected)
    if len(tokens) not in allowed:
        raise format_error(
            path,
            line_id,
            "wrong number of columns",
            expected=expected,
            actual=len(tokens),
        )
