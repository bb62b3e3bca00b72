from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from lispy.config import get_prelude_root

logger = logging.getLogger(__name__)

PRELUDE_FILE = 'std.lspy'


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def resolve_prelude() -> Path:
    return get_prelude_root() / PRELUDE_FILE


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate the standard prelude into `itp`; FileNotFoundError if it is missing."""
    path = resolve_prelude()
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find prelude '{path}' (LISPY_PRELUDE_PATH)")
    logger.debug("loading prelude from %s", path)
    itp.eval_prelude(path.read_text(encoding='utf-8'))
