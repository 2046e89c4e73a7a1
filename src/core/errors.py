"""Core exceptions.

Each failure of a run maps to one exception type. The CLI catches
`TzClockError` at the top level, prints the message and exits.
"""

from __future__ import annotations

from pathlib import Path


class TzClockError(Exception):
    """Base class for every expected failure of a tzclock run."""


class ConfigLocationError(TzClockError):
    """No explicit config path was given and no home directory is known."""

    def __init__(self, message: str = "No home directory!") -> None:
        super().__init__(message)


class ConfigReadError(TzClockError):
    """The config file could not be opened or read."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class ConfigFormatError(TzClockError):
    """A config line is not a valid timezone identifier."""

    def __init__(self, line: str, reason: str, *, line_number: int | None = None) -> None:
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Invalid timezone {line!r}{where}: {reason}")
