"""Configuration models and helpers for the time log."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Mapping, Optional

from .paths import get_log_path

DEFAULT_EDITOR = "vi"


@dataclass(slots=True)
class TimelogSettings:
    """Runtime configuration for a session."""

    log_path: Path
    editor: str = DEFAULT_EDITOR
    clock: Callable[[], datetime] = datetime.now

    @classmethod
    def from_environment(
        cls,
        log_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "TimelogSettings":
        environ = os.environ if environ is None else environ
        return cls(
            log_path=Path(log_path) if log_path is not None else get_log_path(environ),
            editor=environ.get("EDITOR") or DEFAULT_EDITOR,
        )
