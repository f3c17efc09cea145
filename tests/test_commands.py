from __future__ import annotations

import pytest

from timelog.commands import Add, Edit, Help, Invalid, Nothing, Quit, SwitchMode, parse_command
from timelog.models import TimeMode


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", Nothing()),
        ("   ", Nothing()),
        (":q", Quit()),
        (":h", Help()),
        (":e", Edit()),
        (":w", SwitchMode(TimeMode.WEEKLY)),
        (":d", SwitchMode(TimeMode.DAILY)),
        (":w2", SwitchMode(TimeMode.WEEKLY, 2)),
        (":d7", SwitchMode(TimeMode.DAILY, 7)),
        (":q  ", Quit()),
        ("foo", Add("foo")),
        ("foo  ", Add("foo")),
        ("** lunch", Add("** lunch")),
        ("**", Add("**")),
    ],
)
def test_parse_command(text, expected):
    assert parse_command(text) == expected


@pytest.mark.parametrize(
    "text, message",
    [
        (":x", "Unknown command: :x"),
        (":e2", "Unknown command: :e2"),
        (":Q", "Unknown command: :Q"),
        (":", "Unknown command: :"),
        (":da", "Invalid day number"),
        (":d0", "Invalid day number"),
        (":d-1", "Invalid day number"),
        (":w x", "Invalid week number"),
        (":w0", "Invalid week number"),
    ],
)
def test_parse_invalid_command(text, message):
    assert parse_command(text) == Invalid(message)
