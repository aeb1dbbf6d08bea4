from __future__ import annotations
import logging
import os
from typing import Optional


# Defaults
_DEFAULT_RECURSION_LIMIT = 10000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_recursion_limit() -> int:
    # Evaluation and read-back recurse on the structure of the scrutinee
    return max(int_from_env('PIE_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT), 1000)


def get_log_level() -> Optional[int]:
    raw = os.environ.get('PIE_LOG_LEVEL')
    if not raw or not raw.strip():
        return None
    name = raw.strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"PIE_LOG_LEVEL must name a logging level, got {raw!r}")
    return level


def configure_logging() -> None:
    """Apply PIE_LOG_LEVEL to the `pie` logger hierarchy, if it is set."""
    level = get_log_level()
    if level is not None:
        logging.getLogger('pie').setLevel(level)
