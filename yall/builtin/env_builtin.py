"""Built-in functions for the yall runtime environment.

Every builtin takes the already-evaluated argument list (a proper list of
Cells) and returns a yall value. `register` binds them all into an
environment as Function values.
"""
from __future__ import annotations

from types import MappingProxyType

from yall import Expr
from yall.errors import YallArityError, YallTypeError
from yall.types.atoms import Integer, String
from yall.types.boolean import TRUE, to_bool
from yall.types.callables import Function
from yall.types.cell import Cell, Empty
from yall.types.environment import Environment
from yall.types.symbol import Symbol
from yall.types.type_tag import type_of


def _integers(args: Cell, name: str) -> list[int]:
    values = []
    for arg in args:
        if not isinstance(arg, Integer):
            raise YallTypeError(f"{name} requires integers, but got {arg}")
        values.append(arg.value)
    return values


def _single(args: Cell, name: str) -> Expr:
    if args is Empty:
        raise YallArityError(f"Too few arguments to {name}, 1 required")
    if args.cdr is not Empty:
        raise YallArityError(f"Too many arguments to {name}")
    return args.car


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Cell) -> Expr:
    """Sum of all arguments; 0 for none."""
    return Integer(sum(_integers(args, "+")))


def sub(args: Cell) -> Expr:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    values = _integers(args, "-")
    if not values:
        raise YallArityError("Too few arguments to minus, at least 1 required")
    if len(values) == 1:
        return Integer(-values[0])
    result = values[0]
    for x in values[1:]:
        result -= x
    return Integer(result)


def mul(args: Cell) -> Expr:
    """Product of all arguments; 1 for none."""
    result = 1
    for x in _integers(args, "*"):
        result *= x
    return Integer(result)


# -------------------------------
# List operations
# -------------------------------
def car(args: Cell) -> Expr:
    pair = _single(args, "car")
    if not isinstance(pair, Cell) or pair is Empty:
        raise YallTypeError(f"pair required, but got {pair}")
    return pair.car


def cdr(args: Cell) -> Expr:
    pair = _single(args, "cdr")
    if not isinstance(pair, Cell) or pair is Empty:
        raise YallTypeError(f"pair required, but got {pair}")
    return pair.cdr


def cons(args: Cell) -> Expr:
    # the second argument must already be a list: no improper cons here
    if args is Empty or args.cdr is Empty:
        raise YallArityError("cons requires exactly 2 arguments")
    head, tail = args.car, args.cadr
    if not isinstance(tail, Cell):
        raise YallTypeError(f"Cons requires a cell for the second argument, but got {tail}")
    return Cell(head, tail)


def list_builtin(args: Cell) -> Expr:
    return args


def is_empty(args: Cell) -> Expr:
    return to_bool(_single(args, "empty?") is Empty)


# -------------------------------
# Reflection and output
# -------------------------------
def type_of_builtin(args: Cell) -> Expr:
    return type_of(_single(args, "type-of"))


def println(args: Cell) -> Expr:
    """Print each argument on its own line; strings without their quotes."""
    for arg in args:
        print(arg.value if isinstance(arg, String) else str(arg))
    return TRUE


BUILTIN_FUNCTIONS = MappingProxyType({
    "+": add,
    "-": sub,
    "*": mul,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "list": list_builtin,
    "empty?": is_empty,
    "type-of": type_of_builtin,
    "println": println,
})


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({Symbol(name): Function(name, fn) for name, fn in BUILTIN_FUNCTIONS.items()})
