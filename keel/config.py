from __future__ import annotations
import logging
import os


_DEFAULT_PROMPT = "> "
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT = 10000


def get_prompt() -> str:
    return os.environ.get("KEEL_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get("KEEL_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName maps unknown names to "Level <name>"
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> int:
    raw = os.environ.get("KEEL_RECURSION_LIMIT")
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 1000)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
