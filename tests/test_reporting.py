from __future__ import annotations

import io
from datetime import date, datetime, timedelta

from conftest import ONE_DAY, TWO_WEEKS
from timelog.aggregation import aggregate, day_window, week_window
from timelog.models import Activity, TimeMode, Window
from timelog.parser import parse
from timelog.reporting import (
    CLEAR_SCREEN,
    ReportPrinter,
    format_activity,
    format_duration,
    format_header,
    format_prompt,
    format_report,
)


def test_format_activity():
    assert format_activity(Activity("code this", False, timedelta(minutes=3))) == " 0 h  3 min: code this"
    assert format_activity(Activity("code this", False, timedelta(minutes=59))) == " 0 h 59 min: code this"
    assert format_activity(Activity("code this", False, timedelta(minutes=60))) == " 1 h  0 min: code this"
    assert format_activity(Activity("code this", False, timedelta(hours=23, minutes=1))) == "23 h  1 min: code this"
    assert format_activity(Activity("tea", True, timedelta(minutes=5))) == " 0 h  5 min: ** tea"


def test_format_duration():
    assert format_duration(timedelta(0)) == "0 h 0 min"
    assert format_duration(timedelta(hours=7, minutes=55, seconds=59)) == "7 h 55 min"


def test_daily_report():
    result = aggregate(parse(ONE_DAY), day_window(date(2022, 6, 10)))

    assert format_report(result, TimeMode.DAILY, today=date(2022, 6, 10)) == (
        "Work done today Friday, 2022-06-10 (week 23):\n"
        " 1 h 45 min: arrived\n"
        " 0 h 45 min: gtimelog: code\n"
        " 3 h 55 min: ** tea\n"
        " 0 h 40 min: customer joe: inquiry\n"
        " 0 h 45 min: ** lunch\n"
        " 1 h  0 min: code\n"
        " 0 h 10 min: bug triage\n"
        "-------\n"
        "Total work done: 4 h 20 min\n"
        "Total slacking: 4 h 40 min"
    )


def test_weekly_report():
    result = aggregate(parse(TWO_WEEKS), week_window(date(2022, 6, 7)))

    assert format_report(result, TimeMode.WEEKLY, today=date(2022, 6, 7)) == (
        "Work done this week 2022, week 23 (June 6-12):\n"
        " 3 h  0 min: arrived\n"
        " 0 h 20 min: workw2\n"
        "-------\n"
        "Total work done: 3 h 20 min\n"
        "Total slacking: 0 h 0 min"
    )


def test_headers():
    assert format_header(TimeMode.DAILY, day_window(date(2022, 6, 10), 3), 3, date(2022, 6, 9)) == (
        "Work done in the last 3 days (2022-06-08 to 2022-06-10):"
    )
    assert format_header(TimeMode.WEEKLY, week_window(date(2022, 6, 10), 2), 2, date(2022, 6, 10)) == (
        "Work done in the last 2 weeks (2022-05-30 to 2022-06-12):"
    )
    assert format_header(
        TimeMode.WEEKLY, Window(datetime(2022, 5, 30), datetime(2022, 6, 6)), today=date(2022, 6, 5)
    ) == "Work done this week 2022, week 22 (May 30-June 5):"


def test_prompt():
    assert format_prompt(None) == "no entries yet today; type command (:h for help) or entry"
    assert format_prompt(timedelta(hours=1, minutes=5, seconds=30)) == (
        "1 h 5 min since last entry; type command (:h for help) or entry"
    )


def test_printer_writes_to_stream():
    stream = io.StringIO()
    printer = ReportPrinter(stream)
    result = aggregate([], day_window(date(2022, 6, 10)))

    printer.print_report(result, TimeMode.DAILY, today=date(2022, 6, 10))
    printer.print_error("Unknown command: :x")

    output = stream.getvalue()
    assert output.startswith(CLEAR_SCREEN + "Work done today")
    assert output.endswith("Error: Unknown command: :x\n")


def test_headers_for_past_periods():
    day = day_window(date(2022, 6, 1))
    assert format_header(TimeMode.DAILY, day, today=date(2022, 6, 10)) == (
        "Work done on Wednesday, 2022-06-01 (week 22):"
    )
    assert format_header(TimeMode.DAILY, day) == "Work done on Wednesday, 2022-06-01 (week 22):"
    assert format_header(TimeMode.WEEKLY, week_window(date(2022, 6, 1)), today=date(2022, 6, 10)) == (
        "Work done in 2022, week 22 (May 30-June 5):"
    )
    assert format_header(
        TimeMode.DAILY, day_window(date(2022, 6, 3), 3), 3, today=date(2022, 6, 10)
    ) == "Work done from 2022-06-01 to 2022-06-03:"
