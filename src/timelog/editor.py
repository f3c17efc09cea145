"""Launching an external editor on the log file."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def launch_editor(editor: str, path: Path) -> bool:
    """Run ``editor`` on ``path`` and wait for it; returns False if it could not start."""
    command = shlex.split(editor) + [str(path)]
    try:
        completed = subprocess.run(command, check=False)
    except OSError:
        logger.exception("Failed to run %s on %s", editor, path)
        return False
    if completed.returncode != 0:
        logger.warning("%s exited with status %d", editor, completed.returncode)
    return True
