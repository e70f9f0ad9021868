"""Front-end settings for the Yu REPL, read from environment variables.

The evaluator itself takes no configuration.
"""

from __future__ import annotations
import os
from pathlib import Path

from yu import __version__

BANNER = f"Yu v{__version__}"
FAREWELL = "Bye!"

_DEFAULT_HISTORY_FILE = Path.home() / ".yu_history"
_DEFAULT_PROMPT = "> "


def get_history_file() -> Path | None:
    """Readline history location; YU_HISTORY_FILE="" disables history."""
    raw = os.environ.get("YU_HISTORY_FILE")
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_prompt() -> str:
    return os.environ.get("YU_PROMPT", _DEFAULT_PROMPT)
