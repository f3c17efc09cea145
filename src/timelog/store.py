"""Append-only storage of log entries in a plain text file."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from .errors import TimelogReadError, TimelogWriteError
from .models import Entry, Window
from .parser import format_entry, parse

logger = logging.getLogger(__name__)

# Every character str.splitlines treats as a line boundary.
_LINE_BREAKS = frozenset("\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029")


def load(path: Path) -> list[Entry]:
    """Read and parse the log at ``path``; a missing file is an empty log."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("No existing %s, starting new log", path)
        return []
    except (OSError, UnicodeDecodeError) as exc:
        raise TimelogReadError(path, f"could not read log: {exc}") from exc
    entries = parse(raw)
    logger.debug("Loaded %d entries from %s", len(entries), path)
    return entries


class LogStore:
    """Owns the in-memory entries and keeps them in step with the file.

    Existing lines are never rewritten; new entries are appended to the end of
    the file and only recorded in memory once the write reached the disk.
    """

    def __init__(self, path: Path, entries: Optional[Iterable[Entry]] = None) -> None:
        self.path = Path(path)
        self._entries: list[Entry] = list(entries or [])

    @classmethod
    def open(cls, path: Path) -> "LogStore":
        return cls(path, load(path))

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    @property
    def last(self) -> Optional[Entry]:
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def reload(self) -> None:
        """Re-read the file, e.g. after it was edited by hand."""
        self._entries = load(self.path)

    def add(self, description: str, now: datetime) -> Entry:
        """Append a new entry stamped with ``now`` (truncated to the minute)."""
        entry = Entry(
            timestamp=now.replace(second=0, microsecond=0),
            description=description,
        )
        return self.append(entry)

    def append(self, entry: Entry) -> Entry:
        """Write ``entry`` as one line at the end of the file, then record it."""
        description = entry.description.rstrip()
        if any(char in _LINE_BREAKS for char in description):
            raise TimelogWriteError(
                self.path, f"description must fit on one line: {description!r}"
            )
        if description != entry.description:
            entry = Entry(timestamp=entry.timestamp, description=description)

        chunk = self._separator_for(entry) + format_entry(entry) + "\n"
        try:
            data = chunk.encode("utf-8")
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("ab") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
        except (OSError, UnicodeError) as exc:
            logger.error("Failed to append to %s: %s", self.path, exc)
            raise TimelogWriteError(self.path, f"could not append entry: {exc}") from exc

        self._entries.append(entry)
        logger.debug("Appended entry: %s", format_entry(entry))
        return entry

    def in_window(self, window: Window) -> list[Entry]:
        return [entry for entry in self._entries if entry.timestamp in window]

    def history(self, window: Window) -> list[str]:
        """Distinct descriptions inside ``window`` in first-seen order."""
        seen: dict[str, None] = {}
        for entry in self.in_window(window):
            seen.setdefault(entry.description, None)
        return list(seen)

    def _separator_for(self, entry: Entry) -> str:
        prefix = ""
        if not self._ends_with_newline():
            prefix = "\n"
        last = self.last
        if last is not None and last.timestamp.date() != entry.timestamp.date():
            prefix += "\n"
        return prefix

    def _ends_with_newline(self) -> bool:
        try:
            with self.path.open("rb") as handle:
                handle.seek(0, os.SEEK_END)
                if handle.tell() == 0:
                    return True
                handle.seek(-1, os.SEEK_END)
                return handle.read(1) == b"\n"
        except FileNotFoundError:
            return True
        except OSError as exc:
            raise TimelogWriteError(self.path, f"could not inspect log: {exc}") from exc
