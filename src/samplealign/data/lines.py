from __future__ import annotations

import gzip
import io
import zlib

from ..error import AlignError, IoReason, for_file, io_error

GZIP_MAGIC = b"\x1f\x8b"

_STREAM_FAULTS = (EOFError, OSError, zlib.error, UnicodeDecodeError)


class LineStream:
    """One pass over the lines of a plain or gzip-compressed text file.

    Lines come back without their line terminator. Use it as a context
    manager so the handle is released on every exit path.
    """

    def __init__(self, path: str, handle: io.TextIOBase) -> None:
        self.path = path
        self.line_id = 0
        self.at_eof = False
        self._handle = handle
        self._fault: AlignError | None = None
        self._closed = False

    def __iter__(self) -> "LineStream":
        return self

    def __next__(self) -> str:
        if self._fault is not None:
            raise self._fault
        if self.at_eof or self._closed:
            raise StopIteration
        try:
            line = self._handle.readline()
        except _STREAM_FAULTS as exc:
            self._fault = io_error(
                self.path,
                IoReason.CORRUPT_STREAM,
                f"can't read stream past line {self.line_id} ({exc})",
                line=self.line_id + 1,
            )
            raise self._fault from exc
        if line == "":
            self.at_eof = True
            raise StopIteration
        self.line_id += 1
        return line.rstrip("\r\n")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._handle.close()
        except _STREAM_FAULTS as exc:
            raise io_error(
                self.path, IoReason.CORRUPT_STREAM, f"can't close the file ({exc})"
            ) from exc
        if self._fault is not None:
            raise self._fault

    def __enter__(self) -> "LineStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.close()
        except AlignError:
            # the body's own exception takes precedence
            if exc_type is None:
                raise


def is_gzip(path: str) -> bool:
    with open(path, "rb") as probe:
        return probe.read(2) == GZIP_MAGIC


def open_lines(path: str) -> LineStream:
    try:
        if is_gzip(path):
            handle = gzip.open(path, "rt", encoding="utf-8", newline="\n")
        else:
            handle = open(path, "r", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise for_file(path, exc) from exc
    return LineStream(path, handle)
