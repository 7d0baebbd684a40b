"""Callable values: functions, macros and special forms.

All three pair a display name with a Python callable. They differ only in
what the evaluator hands them and what it does with the result:

- Function: receives the evaluated argument list, its result is the value.
- Macro: receives the unevaluated argument list, its result is evaluated
  again in the caller's environment.
- SpecialForm: receives the calling environment and the unevaluated
  argument list.
"""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from yall import Expr

if TYPE_CHECKING:
    from yall.types.cell import Cell
    from yall.types.environment import Environment


class Function:
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[Cell], Expr]):
        self.name = name
        self.fn = fn

    def apply(self, args: Cell) -> Expr:
        return self.fn(args)

    def __repr__(self):
        return f"Function({self.name!r})"

    def __str__(self):
        return f"<function {self.name}>"


class Macro:
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[Cell], Expr]):
        self.name = name
        self.fn = fn

    def expand(self, args: Cell) -> Expr:
        return self.fn(args)

    def __repr__(self):
        return f"Macro({self.name!r})"

    def __str__(self):
        return f"<macro {self.name}>"


class SpecialForm:
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[Environment, Cell], Expr]):
        self.name = name
        self.fn = fn

    def apply(self, env: Environment, args: Cell) -> Expr:
        return self.fn(env, args)

    def __repr__(self):
        return f"SpecialForm({self.name!r})"

    def __str__(self):
        return f"<special-form {self.name}>"
