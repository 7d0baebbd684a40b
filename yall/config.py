from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Resolve installation dir (yall package directory)
_YALL_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _YALL_DIR / 'prelude'
PRELUDE_FILENAME = 'sys.yall'
PRELUDE_ENV_VAR = 'YALL_PRELUDE_PATH'


def get_prelude_path(path: Optional[Path] = None) -> Path:
    """Return the prelude file to load.

    An explicit `path` wins, then $YALL_PRELUDE_PATH, then the bundled
    prelude. The value is a single path; a directory means its sys.yall.
    """
    if path is None:
        raw = os.environ.get(PRELUDE_ENV_VAR)
        path = Path(raw) if raw else _DEFAULT_PRELUDE_DIR
    return path / PRELUDE_FILENAME if path.is_dir() else path
