"""Turn a sequence of entries into per-activity durations."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional, Union

from .models import Activity, AggregationResult, Entry, TimeMode, Window
from .parser import format_entry

logger = logging.getLogger(__name__)

Anchor = Union[date, datetime]


def _midnight(day: Anchor) -> datetime:
    if isinstance(day, datetime):
        day = day.date()
    return datetime.combine(day, time.min)


def day_window(anchor: Anchor, days: int = 1) -> Window:
    """The ``days`` calendar days ending with the anchor's day."""
    if days < 1:
        raise ValueError("days must be at least 1")
    end = _midnight(anchor) + timedelta(days=1)
    return Window(start=end - timedelta(days=days), end=end)


def week_window(anchor: Anchor, weeks: int = 1) -> Window:
    """The ``weeks`` Monday-to-Monday weeks ending with the anchor's week."""
    if weeks < 1:
        raise ValueError("weeks must be at least 1")
    day_start = _midnight(anchor)
    monday = day_start - timedelta(days=day_start.weekday())
    end = monday + timedelta(weeks=1)
    return Window(start=end - timedelta(weeks=weeks), end=end)


def window_for(mode: TimeMode, anchor: Anchor, count: int = 1) -> Window:
    if mode is TimeMode.WEEKLY:
        return week_window(anchor, count)
    return day_window(anchor, count)


def aggregate(
    entries: Iterable[Entry],
    window: Window,
    *,
    last_entry: Optional[Entry] = None,
    now: Optional[datetime] = None,
) -> AggregationResult:
    """Accumulate the gaps between consecutive entries inside ``window``.

    The gap after an entry is credited to that entry's activity. The first
    entry of each day only marks a start time, so gaps that cross midnight
    are not counted. When ``last_entry`` (the newest entry of the whole log)
    is also the newest entry of the window, the time elapsed since it is
    reported as ``since_last`` but left out of the totals.
    """
    included = [entry for entry in entries if entry.timestamp in window]
    result = AggregationResult(window=window)
    buckets: dict[tuple[bool, str], Activity] = {}

    for current, following in zip(included, included[1:]):
        if current.timestamp.date() != following.timestamp.date():
            continue
        gap = following.timestamp - current.timestamp
        if gap < timedelta(0):
            logger.warning(
                "Entry '%s' is older than its predecessor; counting it as zero.",
                format_entry(following),
            )
            gap = timedelta(0)

        key = (current.is_slack, current.activity_name)
        activity = buckets.get(key)
        if activity is None:
            activity = Activity(name=current.activity_name, is_slack=current.is_slack)
            buckets[key] = activity
            result.activities.append(activity)
        activity.duration += gap

        if current.is_slack:
            result.total_slack += gap
        else:
            result.total_work += gap

    if included and now is not None and last_entry is not None and included[-1] == last_entry:
        result.since_last = max(now - last_entry.timestamp, timedelta(0))

    return result
