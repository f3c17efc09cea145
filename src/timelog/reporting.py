"""Formatting of reports, prompts and help for the console."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, TextIO

from .models import SLACK_MARKER, Activity, AggregationResult, TimeMode, Window

CLEAR_SCREEN = "\x1bc"

HELP_TEXT = """
:w  - switch to weekly mode (:w2, :w3, ... for the last weeks)
:d  - switch to daily mode (:d2, :d3, ... for the last days)
:q  - quit
:h  - show this help
:e  - open the log file in $EDITOR

Any other input is the description of a task that you just finished.
Start it with ** to record slack time, e.g. "** lunch"."""


def format_duration(duration: timedelta) -> str:
    total_minutes = int(duration.total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours} h {minutes} min"


def format_activity(activity: Activity) -> str:
    total_minutes = int(activity.duration.total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)
    name = f"{SLACK_MARKER} {activity.name}" if activity.is_slack else activity.name
    return f"{hours:>2} h {minutes:>2} min: {name}"


def format_header(
    mode: TimeMode, window: Window, count: int = 1, today: Optional[date] = None
) -> str:
    """Headline for a report; relative wording only when ``today`` is inside the window."""
    last_day = window.end - timedelta(days=1)
    current = today is not None and datetime.combine(today, time.min) in window
    span = f"{window.start:%Y-%m-%d} to {last_day:%Y-%m-%d}"
    if count > 1:
        unit = "weeks" if mode is TimeMode.WEEKLY else "days"
        if current:
            return f"Work done in the last {count} {unit} ({span}):"
        return f"Work done from {span}:"
    if mode is TimeMode.WEEKLY:
        if current:
            return f"Work done this week {_week_label(window)}:"
        return f"Work done in {_week_label(window)}:"
    if current:
        return f"Work done today {window.start:%A, %Y-%m-%d (week %W)}:"
    return f"Work done on {window.start:%A, %Y-%m-%d (week %W)}:"


def _week_label(window: Window) -> str:
    monday = window.start
    sunday = window.end - timedelta(days=1)
    if monday.month == sunday.month:
        span = f"{monday:%B} {monday.day}-{sunday.day}"
    else:
        span = f"{monday:%B} {monday.day}-{sunday:%B} {sunday.day}"
    return f"{monday:%Y, week %W} ({span})"


def format_report(
    result: AggregationResult, mode: TimeMode, count: int = 1, today: Optional[date] = None
) -> str:
    lines = [format_header(mode, result.window, count, today)]
    lines.extend(format_activity(activity) for activity in result.activities)
    lines.append("-------")
    lines.append(f"Total work done: {format_duration(result.total_work)}")
    lines.append(f"Total slacking: {format_duration(result.total_slack)}")
    return "\n".join(lines)


def format_prompt(since_last: Optional[timedelta]) -> str:
    if since_last is None:
        status = "no entries yet today"
    else:
        status = f"{format_duration(since_last)} since last entry"
    return f"{status}; type command (:h for help) or entry"


class ReportPrinter:
    """Render session output on a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = True) -> None:
        self.stream = stream
        self.clear = clear

    def print_report(
        self,
        result: AggregationResult,
        mode: TimeMode,
        count: int = 1,
        today: Optional[date] = None,
    ) -> None:
        if self.clear:
            print(CLEAR_SCREEN, end="", file=self.stream)
        print(format_report(result, mode, count, today), file=self.stream)

    def print_prompt(self, since_last: Optional[timedelta]) -> None:
        print(file=self.stream)
        print(format_prompt(since_last), file=self.stream)

    def print_help(self) -> None:
        print(HELP_TEXT, file=self.stream)

    def print_error(self, message: str) -> None:
        print(f"Error: {message}", file=self.stream)
