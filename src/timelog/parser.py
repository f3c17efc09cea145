"""Reading and writing the gtimelog line format.

Every entry is one line ``YYYY-MM-DD HH:MM: description``. Blank lines
separate days and carry no data. The description may be empty; a leading
``**`` marks slack time.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Iterable, Optional

from .models import Entry

logger = logging.getLogger(__name__)

TIME_FMT = "%Y-%m-%d %H:%M"

_LINE_PATTERN = re.compile(
    r"^(?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}):(?: (?P<description>.*))?$"
)


def parse_line(line: str) -> Optional[Entry]:
    """Parse a single line, returning ``None`` for blank or malformed lines."""
    line = line.strip()
    if not line:
        return None

    match = _LINE_PATTERN.match(line)
    if match is None:
        logger.warning("Ignoring invalid line in timelog: %s", line)
        return None

    try:
        timestamp = datetime.strptime(match["stamp"], TIME_FMT)
    except ValueError:
        logger.warning("Ignoring line with invalid date in timelog: %s", line)
        return None
    return Entry(timestamp=timestamp, description=match["description"] or "")


def parse(raw: str) -> list[Entry]:
    """Parse a whole log, skipping separators and lines that do not match."""
    # only "\n" ends a line, unlike str.splitlines
    return list(iter_entries(raw.split("\n")))


def iter_entries(lines: Iterable[str]) -> Iterable[Entry]:
    previous: Optional[Entry] = None
    for lineno, line in enumerate(lines, start=1):
        entry = parse_line(line)
        if entry is None:
            continue
        if previous is not None and entry.timestamp < previous.timestamp:
            logger.warning(
                "Line %d goes back in time (%s < %s); keeping it as-is.",
                lineno,
                entry.timestamp.strftime(TIME_FMT),
                previous.timestamp.strftime(TIME_FMT),
            )
        previous = entry
        yield entry


def format_entry(entry: Entry) -> str:
    """Serialize an entry without the trailing newline."""
    return f"{entry.timestamp.strftime(TIME_FMT)}: {entry.description}"
