from __future__ import annotations
import os
from pathlib import Path

# Resolve installation dir (lispy package directory)
_LISPY_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _LISPY_DIR / 'prelude'
DEFAULT_RECURSION_LIMIT = 10_000


def _env(var: str) -> str:
    return os.environ.get(var, '').strip()


def get_prelude_root() -> Path:
    """Directory holding the standard prelude (LISPY_PRELUDE_PATH)."""
    raw = _env('LISPY_PRELUDE_PATH')
    if not raw:
        return _DEFAULT_PRELUDE_DIR
    p = Path(raw).expanduser()
    # a path to the prelude file itself names its directory
    return p.parent if p.is_file() else p


def get_recursion_limit() -> int:
    """Python recursion limit for evaluation (LISPY_RECURSION_LIMIT)."""
    try:
        limit = int(_env('LISPY_RECURSION_LIMIT'))
    except ValueError:
        return DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else DEFAULT_RECURSION_LIMIT
