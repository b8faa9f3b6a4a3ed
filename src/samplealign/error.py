from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Optional


class ErrorKind:
    CONFIGURATION = "Configuration error"
    IO = "I/O error"
    FORMAT = "Format error"
    VALIDATION = "Validation error"
    TOML_DE = "TOML deserialization error"
    TOML_SER = "TOML serialization error"


class IoReason:
    NOT_FOUND = "not found"
    PERMISSION_DENIED = "permission denied"
    CORRUPT_STREAM = "corrupt stream"
    OTHER = "read failure"


@dataclass
class AlignError(Exception):
    kind: str
    message: str
    path: Optional[str] = None
    line: Optional[int] = None
    expected: object = None
    actual: object = None
    reason: Optional[str] = None

    def __str__(self) -> str:
        location = ""
        if self.path is not None:
            location = f"{self.path}:"
            if self.line is not None:
                location += f"{self.line}:"
            location += " "
        text = f"{self.kind}: {location}{self.message}"
        if self.expected is not None:
            text += f" (expected {_describe(self.expected)}, got {self.actual})"
        elif self.actual is not None:
            text += f" (got {self.actual})"
        return text


def _describe(expected: object) -> str:
    if isinstance(expected, Collection) and not isinstance(expected, str):
        return " or ".join(str(value) for value in expected)
    return str(expected)


def configuration_error(message: str) -> AlignError:
    return AlignError(ErrorKind.CONFIGURATION, message)


def validation_error(message: str) -> AlignError:
    return AlignError(ErrorKind.VALIDATION, message)


def format_error(
    path: str,
    line: int,
    message: str,
    expected: object = None,
    actual: object = None,
) -> AlignError:
    return AlignError(
        ErrorKind.FORMAT, message, path=path, line=line, expected=expected, actual=actual
    )


def io_error(
    path: str, reason: str, message: str, line: Optional[int] = None
) -> AlignError:
    return AlignError(ErrorKind.IO, message, path=path, line=line, reason=reason)


def for_file(file: str, exc: Exception) -> AlignError:
    if isinstance(exc, FileNotFoundError):
        return io_error(file, IoReason.NOT_FOUND, "no such file")
    if isinstance(exc, PermissionError):
        return io_error(file, IoReason.PERMISSION_DENIED, "permission denied")
    return io_error(file, IoReason.OTHER, str(exc))


def for_context(context: str, exc: Exception) -> AlignError:
    if isinstance(exc, AlignError):
        return AlignError(
            exc.kind,
            f"{context}: {exc.message}",
            path=exc.path,
            line=exc.line,
            expected=exc.expected,
            actual=exc.actual,
            reason=exc.reason,
        )
    return AlignError(ErrorKind.CONFIGURATION, f"{context}: {exc}")
