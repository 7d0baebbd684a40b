from __future__ import annotations

from yall import Expr
from yall.errors import YallArityError, YallTypeError
from yall.types.cell import Cell, Empty
from yall.types.environment import Environment
from yall.types.symbol import Symbol

REST_MARKER = Symbol(".")


def bind_lambda_list(env: Environment, lambda_list: Cell, args: Cell) -> Environment:
    """
    Single source of truth for lambda-list binding in yall.

    Walks the formals and the supplied arguments in lockstep, interning into
    `env` (normally a frame freshly derived for one application):

    - `name`            binds the next argument
    - `(name default)`  binds the next argument, or the *unevaluated* default
                        expression once the arguments run out
    - `. name`          binds the whole remaining argument list and stops

    Surplus arguments are ignored. Missing arguments for a plain formal raise
    YallArityError.
    """
    if not isinstance(lambda_list, Cell):
        raise YallTypeError(f"Lambda list must be a list, got {lambda_list}")

    formals = lambda_list
    supplied: Expr = args
    while formals is not Empty:
        formal = formals.car
        if formal == REST_MARKER:
            rest = formals.cdr
            if rest is Empty or not isinstance(rest, Cell) or not isinstance(rest.car, Symbol):
                raise YallTypeError(f"Malformed lambda list {lambda_list}: '.' must be followed by a name")
            env.intern(rest.car, supplied)
            break
        if isinstance(formal, Symbol):
            if supplied is Empty:
                raise YallArityError(f"Too few arguments; missing parameter {formal}")
            env.intern(formal, supplied.car)
            supplied = supplied.tail
        elif isinstance(formal, Cell) and formal is not Empty and isinstance(formal.car, Symbol):
            if supplied is Empty:
                default = formal.cadr if formal.cdr is not Empty else Empty
                env.intern(formal.car, default)
            else:
                env.intern(formal.car, supplied.car)
                supplied = supplied.tail
        else:
            raise YallTypeError(f"Malformed lambda list {lambda_list}: bad formal {formal}")
        formals = formals.tail
    return env
