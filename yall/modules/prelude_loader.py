from __future__ import annotations

import logging
from pathlib import Path

from yall.config import get_prelude_path
from yall.errors import YallBootstrapError, YallError
from yall.evaluation.evaluator import load
from yall.types.environment import Environment

logger = logging.getLogger(__name__)


def resolve_prelude(path: Path | None = None) -> Path:
    p = get_prelude_path(path)
    if not p.is_file():
        raise YallBootstrapError(f"Failed to open prelude {p}")
    return p


def load_prelude(env: Environment, path: Path | None = None) -> None:
    """Evaluate the bootstrap prelude into `env`.

    A missing prelude or any error inside it is fatal: the environment being
    constructed is unusable without it.
    """
    p = resolve_prelude(path)
    logger.debug("Loading prelude from %s", p)
    try:
        with p.open(encoding='utf-8') as stream:
            load(env, stream)
    except YallError as e:
        raise YallBootstrapError(f"Failed to load prelude {p}: {e}") from e
