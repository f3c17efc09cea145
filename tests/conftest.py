from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from timelog.store import LogStore

ONE_DAY = """
2022-06-10 07:00: arrived
2022-06-10 08:45: gtimelog: code
2022-06-10 09:00: ** tea
2022-06-10 12:05: gtimelog: code
2022-06-10 12:35: customer joe: inquiry
2022-06-10 13:15: ** lunch
2022-06-10 14:00: code
2022-06-10 15:00: bug triage
2022-06-10 15:10: ** tea
2022-06-10 16:00: customer joe: support
"""

TWO_WEEKS = """
2022-06-01 06:00: arrived
2022-06-01 07:00: workw1
2022-06-01 07:10: ** tea

2022-06-03 06:00: arrived
2022-06-03 07:00: workw1
2022-06-03 07:10: ** tea

2022-06-08 06:00: arrived
2022-06-08 07:00: workw2
2022-06-08 07:10: ** tea

2022-06-09 06:00: arrived
2022-06-09 07:00: workw2

2022-06-10 06:00: arrived
2022-06-10 07:00: workw2
2022-06-10 07:10: ** tea
"""


class FixedClock:
    """Clock returning a settable moment."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2022, 6, 10, 16, 30, 42))


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "gtimelog" / "timelog.txt"


@pytest.fixture
def write_log(log_path: Path):
    def _write(contents: str) -> Path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(contents.lstrip("\n"), encoding="utf-8")
        return log_path

    return _write


@pytest.fixture
def store(log_path: Path) -> LogStore:
    return LogStore.open(log_path)
