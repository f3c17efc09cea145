"""Interpretation of a line typed at the prompt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .models import TimeMode

COMMAND_PREFIX = ":"


@dataclass(frozen=True, slots=True)
class Nothing:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Help:
    pass


@dataclass(frozen=True, slots=True)
class Edit:
    pass


@dataclass(frozen=True, slots=True)
class SwitchMode:
    mode: TimeMode
    count: int = 1


@dataclass(frozen=True, slots=True)
class Add:
    description: str


@dataclass(frozen=True, slots=True)
class Invalid:
    message: str


Command = Union[Nothing, Quit, Help, Edit, SwitchMode, Add, Invalid]

_SIMPLE_COMMANDS: dict[str, Command] = {
    ":q": Quit(),
    ":h": Help(),
    ":e": Edit(),
    ":d": SwitchMode(TimeMode.DAILY),
    ":w": SwitchMode(TimeMode.WEEKLY),
}

_COUNTED_COMMANDS: dict[str, tuple[TimeMode, str]] = {
    ":d": (TimeMode.DAILY, "Invalid day number"),
    ":w": (TimeMode.WEEKLY, "Invalid week number"),
}


def parse_command(text: str) -> Command:
    """Map raw input to a command; anything not starting with ``:`` is an entry."""
    text = text.rstrip()
    if not text:
        return Nothing()
    if not text.startswith(COMMAND_PREFIX):
        return Add(text)

    simple = _SIMPLE_COMMANDS.get(text)
    if simple is not None:
        return simple

    for prefix, (mode, error) in _COUNTED_COMMANDS.items():
        if text.startswith(prefix):
            return _parse_count(text[len(prefix):], mode, error)

    return Invalid(f"Unknown command: {text}")


def _parse_count(argument: str, mode: TimeMode, error: str) -> Command:
    if not (argument.isascii() and argument.isdigit()):
        return Invalid(error)
    count = int(argument)
    if count < 1:
        return Invalid(error)
    return SwitchMode(mode, count)
