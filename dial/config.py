from __future__ import annotations
import logging
import os


_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_PROMPT = "user=> "


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def get_log_level(override: str | None = None) -> int:
    """Resolve a logging level from `override` or DIAL_LOG_LEVEL, falling back to WARNING."""
    name = (override or value_from_env("DIAL_LOG_LEVEL", _DEFAULT_LOG_LEVEL)).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_prompt() -> str:
    return value_from_env("DIAL_PROMPT", _DEFAULT_PROMPT)
