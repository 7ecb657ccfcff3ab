from __future__ import annotations
import logging
import os
from pathlib import Path

from lispy.errors import LispyConfigError


# Resolve installation dir (lispy package directory)
_LISPY_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _LISPY_DIR / 'prelude' / 'prelude.lspy'
_DEFAULT_LOG_LEVEL = 'WARNING'


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip())


def get_prelude_path() -> Path:
    return path_from_env('LISPY_PRELUDE_PATH', _DEFAULT_PRELUDE)


def get_recursion_limit() -> int | None:
    """Return the requested Python recursion limit, or None to keep the default.

    Evaluation depth follows expression nesting depth one-to-one (several
    Python frames per level), so deeply nested input needs a larger limit.
    """
    raw = os.environ.get('LISPY_RECURSION_LIMIT')
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise LispyConfigError(f"LISPY_RECURSION_LIMIT must be an integer, got {raw!r}")
    if limit <= 0:
        raise LispyConfigError(f"LISPY_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def get_log_level() -> str:
    level = os.environ.get('LISPY_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise LispyConfigError(f"LISPY_LOG_LEVEL is not a logging level: {level!r}")
    return level
