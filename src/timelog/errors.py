"""Exceptions raised by the log store."""

from __future__ import annotations

from pathlib import Path


class TimelogError(Exception):
    """Base class for failures involving the log file."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = Path(path)


class TimelogReadError(TimelogError):
    """The log file exists but could not be read."""


class TimelogWriteError(TimelogError):
    """An entry could not be durably appended to the log file."""
