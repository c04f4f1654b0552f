from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_SOURCE_NAME = 'lisp'
_DEFAULT_LOG_LEVEL = 'WARNING'


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_source_name() -> str:
    """Name the reader reports in parse-error detail."""
    return str_from_env('SCHEMER_SOURCE_NAME', _DEFAULT_SOURCE_NAME)


def get_log_level() -> int:
    name = str_from_env('SCHEMER_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName maps unknown names to "Level <name>" rather than failing
    return level if isinstance(level, int) else logging.WARNING
