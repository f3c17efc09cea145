"""Domain models for the time log."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

SLACK_MARKER = "**"
UNNAMED_SLACK = "unnamed"


class TimeMode(Enum):
    DAILY = "day"
    WEEKLY = "week"


@dataclass(frozen=True, slots=True)
class Entry:
    """A single log line: the moment a task was finished and its description."""

    timestamp: datetime
    description: str

    @property
    def is_slack(self) -> bool:
        return self.description.startswith(SLACK_MARKER)

    @property
    def slack_label(self) -> str:
        if not self.is_slack:
            return ""
        return self.description[len(SLACK_MARKER):].strip()

    @property
    def activity_name(self) -> str:
        """Bucket name used when aggregating durations."""
        if self.is_slack:
            return self.slack_label or UNNAMED_SLACK
        return self.description


@dataclass(frozen=True, slots=True)
class Window:
    """Half-open interval ``[start, end)`` used to select entries."""

    start: datetime
    end: datetime

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


@dataclass(slots=True)
class Activity:
    """Accumulated time of all entries sharing a bucket."""

    name: str
    is_slack: bool
    duration: timedelta = timedelta(0)


@dataclass(slots=True)
class AggregationResult:
    window: Window
    activities: list[Activity] = field(default_factory=list)
    total_work: timedelta = timedelta(0)
    total_slack: timedelta = timedelta(0)
    since_last: Optional[timedelta] = None

    def get(self, name: str, *, slack: bool = False) -> Optional[Activity]:
        for activity in self.activities:
            if activity.name == name and activity.is_slack == slack:
                return activity
        return None

    @property
    def total(self) -> timedelta:
        return self.total_work + self.total_slack
