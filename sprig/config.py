from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (sprig package directory)
_SPRIG_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _SPRIG_DIR / 'prelude' / 'std.scm'
_DEFAULT_HISTORY_FILE = Path.home() / '.sprig_history'
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 10000


def path_from_env(var: str, default: Path | None) -> Path | None:
    """Read a path from `var`; unset means `default`, an empty value means none."""
    raw = os.environ.get(var)
    if raw is None:
        return default
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_prelude_path() -> Path | None:
    return path_from_env('SPRIG_PRELUDE_PATH', _DEFAULT_PRELUDE)


def get_history_file() -> Path | None:
    return path_from_env('SPRIG_HISTORY_FILE', _DEFAULT_HISTORY_FILE)


def get_log_level() -> str:
    return os.environ.get('SPRIG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int:
    raw = os.environ.get('SPRIG_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"SPRIG_RECURSION_LIMIT must be an integer, got {raw!r}") from None
