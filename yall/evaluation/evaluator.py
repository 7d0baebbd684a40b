"""Core evaluator for the yall interpreter.

Implements literal self-evaluation, symbol lookup, quoting, quasiquote
expansion and call-site dispatch on the runtime type of the head: special
forms get the unevaluated arguments and the environment, functions get the
evaluated arguments, and macros get the unevaluated arguments and have their
expansion evaluated again in the calling environment.
"""

from __future__ import annotations

import io
import logging
from typing import TextIO

from yall import Expr
from yall.errors import YallNotCallableError, YallRuntimeError, YallTypeError
from yall.reader.reader import Reader, read_from_string
from yall.types.atoms import Integer, String
from yall.types.callables import Function, Macro, SpecialForm
from yall.types.cell import Cell, Empty
from yall.types.environment import Environment
from yall.types.quoted import Quasiquoted, Quoted, SplicingUnquoted, Unquoted
from yall.types.symbol import Symbol

logger = logging.getLogger(__name__)


def is_literal(expr: Expr) -> bool:
    return expr is Empty or isinstance(expr, (Integer, String))


def evaluate(expr: Expr, env: Environment) -> Expr:
    """Evaluate `expr` in `env`."""
    if is_literal(expr):
        # integers are mutable through inc!, so source literals are copied
        if isinstance(expr, Integer):
            return Integer(expr.value)
        return expr

    match expr:
        case Symbol():
            return env.lookup(expr)
        case Quoted():
            return expr.expr
        case Quasiquoted():
            return eval_quasiquote(expr.expr, env)
        case Cell():
            return evaluate_cell(expr, env)

    raise YallRuntimeError(f"Failed to eval: {expr}")


def evaluate_cell(cell: Cell, env: Environment) -> Expr:
    """Apply the head of a non-empty list to the rest of it."""
    head = evaluate(cell.car, env)
    args = cell.tail

    match head:
        case SpecialForm():
            return head.apply(env, args)
        case Function():
            return head.apply(evaluate_each(args, env))
        case Macro():
            expansion = head.expand(args)
            return evaluate(expansion, env)

    logger.debug("Calling frame: %s", env)
    raise YallNotCallableError(f"Failed to eval cell: {cell} ({head} is not callable)")


def evaluate_each(cell: Cell, env: Environment) -> Cell:
    """Evaluate every element of a proper list, left to right, into a new list."""
    return Cell.from_iterable([evaluate(e, env) for e in cell])


def eval_quasiquote(expr: Expr, env: Environment) -> Expr:
    """Expand one level of quasiquotation.

    `,x` is replaced by the value of x. A `,@x` is only recognised as the
    second element of a list: the result is the expanded first element consed
    onto the value of x, which must be a list. Elements after the splice are
    not part of the result.
    """
    if isinstance(expr, Unquoted):
        return evaluate(expr.expr, env)
    if isinstance(expr, Cell) and expr is not Empty:
        rest = expr.cdr
        if isinstance(rest, Cell) and rest is not Empty and isinstance(rest.car, SplicingUnquoted):
            head = eval_quasiquote(expr.car, env)
            spliced = evaluate(rest.car.expr, env)
            if not isinstance(spliced, Cell):
                raise YallTypeError(f"Invalid splicing unquote: {spliced} is not a list")
            return Cell(head, spliced)
        return Cell(eval_quasiquote(expr.car, env), eval_quasiquote(rest, env))
    return expr


def begin(body: Cell, env: Environment) -> Expr:
    """Evaluate body forms in order and return the last value (Empty if none)."""
    result: Expr = Empty
    for form in body:
        result = evaluate(form, env)
    return result


def evaluate_string(env: Environment, source: str) -> Expr:
    """Read one expression from `source` and evaluate it."""
    expr, _ = read_from_string(source)
    return evaluate(expr, env)


def load(env: Environment, stream: TextIO) -> Expr:
    """Evaluate every top-level form of `stream`; return the last value.

    The first error aborts the load.
    """
    result: Expr = Empty
    count = 0
    for expr in Reader(stream).read_all():
        result = evaluate(expr, env)
        count += 1
    logger.debug("Evaluated %d top-level forms", count)
    return result


def load_string(env: Environment, source: str) -> Expr:
    return load(env, io.StringIO(source))
