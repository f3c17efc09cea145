"""The interactive session as an explicit state machine.

``dispatch`` takes the current :class:`SessionState` and a parsed command and
returns the next state plus the effects the caller has to carry out (redraw,
show help, launch an editor, show an error). It never touches the terminal
itself; the only side effect it performs is appending to the log store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Optional, Union

from .aggregation import aggregate, window_for
from .commands import Add, Command, Edit, Help, Invalid, Nothing, Quit, SwitchMode, parse_command
from .errors import TimelogError, TimelogWriteError
from .models import AggregationResult, TimeMode, Window
from .store import LogStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass(frozen=True, slots=True)
class Redraw:
    pass


@dataclass(frozen=True, slots=True)
class ShowHelp:
    pass


@dataclass(frozen=True, slots=True)
class LaunchEditor:
    path: Path


@dataclass(frozen=True, slots=True)
class ShowError:
    message: str


Effect = Union[Redraw, ShowHelp, LaunchEditor, ShowError]


@dataclass(frozen=True, slots=True)
class SessionState:
    mode: TimeMode = TimeMode.DAILY
    count: int = 1
    # None follows the clock, so the window rolls over at midnight.
    anchor: Optional[date] = None
    running: bool = True

    def window(self, now: datetime) -> Window:
        return window_for(self.mode, self.anchor or now.date(), self.count)


def dispatch(
    state: SessionState, command: Command, store: LogStore, clock: Clock
) -> tuple[SessionState, list[Effect]]:
    if not state.running:
        return state, []

    if isinstance(command, Quit):
        return replace(state, running=False), []
    if isinstance(command, Help):
        return state, [ShowHelp()]
    if isinstance(command, Edit):
        return state, [LaunchEditor(store.path)]
    if isinstance(command, SwitchMode):
        return replace(state, mode=command.mode, count=command.count), [Redraw()]
    if isinstance(command, Invalid):
        return state, [ShowError(command.message)]
    if isinstance(command, Add):
        try:
            store.add(command.description, clock())
        except TimelogWriteError as exc:
            return state, [ShowError(str(exc))]
        return state, [Redraw()]
    if isinstance(command, Nothing):
        return state, [Redraw()]
    raise TypeError(f"Unsupported command: {command!r}")


class Session:
    """Binds a state to a store and a clock for use by the prompt loop."""

    def __init__(
        self,
        store: LogStore,
        clock: Clock = datetime.now,
        state: Optional[SessionState] = None,
    ) -> None:
        self.store = store
        self.clock = clock
        self.state = state or SessionState()

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def window(self) -> Window:
        return self.state.window(self.clock())

    def handle(self, text: str) -> list[Effect]:
        return self.execute(parse_command(text))

    def execute(self, command: Command) -> list[Effect]:
        self.state, effects = dispatch(self.state, command, self.store, self.clock)
        logger.debug("Handled %r -> %r", command, effects)
        return effects

    def reload(self) -> list[Effect]:
        """Pick up manual edits to the log file."""
        try:
            self.store.reload()
        except TimelogError as exc:
            return [ShowError(str(exc))]
        return [Redraw()]

    def report(self) -> AggregationResult:
        now = self.clock()
        return aggregate(
            self.store.entries,
            self.state.window(now),
            last_entry=self.store.last,
            now=now,
        )

    def history(self) -> list[str]:
        return self.store.history(self.window)
