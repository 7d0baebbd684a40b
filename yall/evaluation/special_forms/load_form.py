from __future__ import annotations

import logging

from yall import Expr
from yall.errors import YallLoadError
from yall.evaluation.evaluator import load
from yall.types.atoms import String
from yall.types.boolean import TRUE
from yall.types.cell import Cell
from yall.types.environment import Environment

logger = logging.getLogger(__name__)


def load_file(env: Environment, path: str) -> Expr:
    """Evaluate every top-level form of the file at `path` in `env`."""
    try:
        stream = open(path, encoding="utf-8")
    except OSError as e:
        raise YallLoadError(f"Cannot load: \"{path}\" ({e.strerror})") from e
    logger.info("Loading %s", path)
    with stream:
        return load(env, stream)


def load_form(env: Environment, args: Cell) -> Expr:
    """(load "path" ...) evaluates each file in the calling environment."""
    for arg in args:
        if not isinstance(arg, String):
            raise YallLoadError(f"Cannot load: {arg}")
        load_file(env, arg.value)
    return TRUE
