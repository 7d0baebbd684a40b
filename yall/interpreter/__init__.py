from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TextIO

from yall import Expr
from yall.builtin.env_builtin import register
from yall.evaluation.evaluator import evaluate, evaluate_string, load
from yall.evaluation.special_forms import SPECIAL_FORMS
from yall.evaluation.special_forms.load_form import load_file
from yall.modules.prelude_loader import load_prelude
from yall.types.boolean import FALSE, TRUE
from yall.types.callables import SpecialForm
from yall.types.environment import Environment
from yall.types.symbol import Symbol

logger = logging.getLogger(__name__)


def make_global_environment(prelude: bool = True, prelude_path: Path | None = None) -> Environment:
    """Build a fresh global environment.

    Order matters: the boolean literals, then every special form, then every
    builtin function, then the bootstrap prelude written in yall itself.
    """
    env = Environment()
    env.intern(Symbol("#t"), TRUE)
    env.intern(Symbol("#f"), FALSE)
    env.update({Symbol(name): SpecialForm(name, fn) for name, fn in SPECIAL_FORMS.items()})
    register(env)
    if prelude:
        load_prelude(env, prelude_path)
    logger.debug("Global environment ready with %d bindings", len(env.values))
    return env


class Interpreter:
    """
    Reads and evaluates yall code against one global environment, so that
    definitions persist across calls.
    """

    def __init__(self, prelude: bool = True, prelude_path: Path | None = None):
        self.env: Environment = make_global_environment(prelude, prelude_path)

    def eval_string(self, code: str) -> Expr:
        """Read the first expression of `code` and evaluate it."""
        return evaluate_string(self.env, code)

    def eval(self, code: str) -> Expr:
        """Evaluate every expression in `code`; return the last value."""
        return load(self.env, io.StringIO(code))

    def eval_expr(self, expr: Expr) -> Expr:
        return evaluate(expr, self.env)

    def load(self, stream: TextIO) -> Expr:
        return load(self.env, stream)

    def load_file(self, path: str) -> Expr:
        return load_file(self.env, path)
