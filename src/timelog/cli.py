"""Command-line interface for the time log."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from .aggregation import aggregate, window_for
from .config import TimelogSettings
from .errors import TimelogError
from .models import TimeMode
from .reporting import format_report
from .store import LogStore

app = typer.Typer(help="Interactive time log, compatible with gtimelog's timelog.txt.")

logger = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    log_file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        path_type=Path,
        help="Location of the timelog.txt file.",
    ),
) -> None:
    """Start the interactive session unless a subcommand is given."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    settings = TimelogSettings.from_environment(log_path=log_file)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        from .repl import run_session
        from .session import Session

        store = _open_store(settings)
        logger.info("Starting session on %s", settings.log_path)
        run_session(Session(store, clock=settings.clock), editor=settings.editor)


@app.command()
def add(
    ctx: typer.Context,
    task: List[str] = typer.Argument(..., help="Description of the task you just finished."),
) -> None:
    """Append a single entry stamped with the current time."""
    settings: TimelogSettings = ctx.obj
    store = _open_store(settings)
    try:
        entry = store.add(" ".join(task), settings.clock())
    except TimelogError as exc:
        _fail(exc)
    logger.info("Added entry at %s", entry.timestamp)


@app.command()
def summary(
    ctx: typer.Context,
    week: bool = typer.Option(False, "--week", "-w", help="Summarize whole weeks instead of days."),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of days or weeks to include."),
    date: Optional[str] = typer.Option(
        None,
        "--date",
        help="Date (YYYY-MM-DD) to summarize. Defaults to today.",
    ),
) -> None:
    """Print the report for a day or week and exit."""
    settings: TimelogSettings = ctx.obj
    if date:
        try:
            target = datetime.strptime(date, "%Y-%m-%d")
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--date") from exc
    else:
        target = settings.clock()

    store = _open_store(settings)
    mode = TimeMode.WEEKLY if week else TimeMode.DAILY
    result = aggregate(store.entries, window_for(mode, target, count))
    typer.echo(format_report(result, mode, count, today=settings.clock().date()))


def _open_store(settings: TimelogSettings) -> LogStore:
    try:
        return LogStore.open(settings.log_path)
    except TimelogError as exc:
        _fail(exc)


def _fail(exc: TimelogError) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)
