from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

SCOPING_MODES = ("dynamic", "lexical")

# Defaults
_DEFAULT_SCOPING = "dynamic"
_DEFAULT_PROMPT = "λ "
_DEFAULT_HISTORY_FILE = Path.home() / ".slisp_history"
_DEFAULT_LOG_LEVEL = "WARNING"


def check_scoping(mode: str) -> str:
    mode = mode.strip().lower()
    if mode not in SCOPING_MODES:
        raise ValueError(f"Unknown scoping mode {mode!r}, expected one of {', '.join(SCOPING_MODES)}")
    return mode


def get_scoping() -> str:
    return check_scoping(os.environ.get("SLISP_SCOPING") or _DEFAULT_SCOPING)


def get_prompt() -> str:
    return os.environ.get("SLISP_PROMPT", _DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    """Readline history path; an empty SLISP_HISTORY_FILE disables history."""
    raw = os.environ.get("SLISP_HISTORY_FILE")
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_log_level() -> int:
    name = (os.environ.get("SLISP_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    return level
