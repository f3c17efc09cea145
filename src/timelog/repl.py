"""Blocking prompt loop that carries out the effects requested by a session."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from .commands import Command, Invalid, Nothing, Quit, parse_command
from .editor import launch_editor
from .reporting import ReportPrinter
from .session import Effect, LaunchEditor, Redraw, Session, ShowError, ShowHelp

try:
    import readline
except ImportError:  # pragma: no cover - readline is missing on Windows
    readline = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

PROMPT = "> "


class PromptLoop:
    """Reads one line per iteration until the session stops running."""

    def __init__(
        self,
        session: Session,
        printer: ReportPrinter,
        editor: str,
        read_line: Callable[[str], str] = input,
        run_editor: Callable[..., bool] = launch_editor,
        use_history: bool = True,
    ) -> None:
        self.session = session
        self.printer = printer
        self.editor = editor
        self._read_line = read_line
        self._run_editor = run_editor
        self._use_history = use_history and readline is not None

    def run(self) -> None:
        effects: list[Effect] = [Redraw()]
        while self.session.running:
            self.apply(effects)
            self.printer.print_prompt(self.session.report().since_last)
            effects = self.session.execute(self.read())
        logger.debug("Session finished.")

    def read(self) -> Command:
        try:
            text = self._read_line(PROMPT)
        except EOFError:
            # ^D behaves like :q
            return Quit()
        except KeyboardInterrupt:
            # ^C aborts the current input, like in a shell
            return Nothing()
        except UnicodeDecodeError as exc:
            logger.warning("Discarding undecodable input: %s", exc)
            return Invalid(f"Input is not valid {exc.encoding} text")
        return parse_command(text)

    def apply(self, effects: Iterable[Effect]) -> None:
        pending = list(effects)
        while pending:
            effect = pending.pop(0)
            if isinstance(effect, Redraw):
                self._redraw()
            elif isinstance(effect, ShowHelp):
                self.printer.print_help()
            elif isinstance(effect, ShowError):
                self.printer.print_error(effect.message)
            elif isinstance(effect, LaunchEditor):
                if not self._run_editor(self.editor, effect.path):
                    self.printer.print_error(f"Failed to run {self.editor} on {effect.path}")
                pending[:0] = self.session.reload()

    def _redraw(self) -> None:
        state = self.session.state
        self.printer.print_report(
            self.session.report(), state.mode, state.count, today=self.session.clock().date()
        )
        if self._use_history:
            self._load_history(self.session.history())

    @staticmethod
    def _load_history(descriptions: Iterable[str]) -> None:
        if readline is None:
            return
        readline.clear_history()
        for description in descriptions:
            if description:
                readline.add_history(description)


def run_session(session: Session, editor: str, printer: Optional[ReportPrinter] = None) -> None:
    PromptLoop(session, printer or ReportPrinter(), editor).run()
