"""Helpers for locating the log file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from platformdirs import PlatformDirs


APP_NAME = "gtimelog"
LOG_FILE_NAME = "timelog.txt"


def get_legacy_dir() -> Path:
    return Path.home() / ".gtimelog"


def get_data_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the directory holding the log, shared with gtimelog."""
    environ = os.environ if environ is None else environ
    legacy = get_legacy_dir()
    if legacy.is_dir():
        return legacy
    xdg_data_home = environ.get("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home) / APP_NAME
    dirs = PlatformDirs(appname=APP_NAME, appauthor=False)
    return Path(dirs.user_data_path)


def get_log_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    return get_data_dir(environ) / LOG_FILE_NAME
