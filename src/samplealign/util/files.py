from __future__ import annotations

import gzip
from pathlib import Path
from typing import TextIO

from ..error import configuration_error, for_file


def check_parent_dir_exists(path: str) -> None:
    parent = Path(path).parent
    if str(parent) != "" and not parent.exists():
        raise configuration_error(f"Directory {parent} does not exist")


def open_output(path: str) -> TextIO:
    try:
        if path.endswith(".gz"):
            return gzip.open(path, "wt", encoding="utf-8")
        return open(path, "w", encoding="utf-8")
    except OSError as exc:
        raise for_file(path, exc) from exc
