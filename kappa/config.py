from __future__ import annotations
import logging
import os
from typing import Optional


def _int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_log_level() -> int:
    """Log level from the LOGLEVEL environment variable, WARNING if unset."""
    name = os.environ.get("LOGLEVEL", "").upper()
    if name:
        level = getattr(logging, name, None)
        if isinstance(level, int):
            return level
    return logging.WARNING


def get_recursion_limit() -> Optional[int]:
    # None keeps the interpreter's default stack budget
    return _int_from_env("KAPPA_RECURSION_LIMIT")
