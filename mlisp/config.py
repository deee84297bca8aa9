"""Session configuration read from environment variables.

MLISP_PROMPT           prompt shown by the REPL (default "mlisp> ")
MLISP_LOG_LEVEL        logging level name (default WARNING)
MLISP_HISTORY          readline history file; empty disables history
MLISP_RECURSION_LIMIT  Python recursion limit applied by the CLI (default 5000)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

_DEFAULT_PROMPT = "mlisp> "
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_HISTORY = Path.home() / ".mlisp_history"
_DEFAULT_RECURSION_LIMIT = 5000


def get_prompt() -> str:
    return os.environ.get("MLISP_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get("MLISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_history_file() -> Optional[Path]:
    raw = os.environ.get("MLISP_HISTORY")
    if raw is None:
        return _DEFAULT_HISTORY
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_recursion_limit() -> int:
    raw = os.environ.get("MLISP_RECURSION_LIMIT")
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT
