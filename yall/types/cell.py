"""Cons cells for yall.

A Cell pairs a `car` with a `cdr`. Proper lists are chains of cells ending in
the `Empty` singleton; a cell whose cdr is not a cell is a dotted pair.
`Empty` is compared by identity only.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from yall import Expr
from yall.errors import YallTypeError


class Cell:
    __slots__ = ("car", "cdr")

    def __init__(self, car: Expr, cdr: Expr):
        self.car = car
        self.cdr = cdr

    @classmethod
    def from_iterable(cls, items: Iterable[Expr], tail: Expr = None) -> Cell:
        """Build a list from `items`, terminated by `tail` (Empty by default)."""
        result = Empty if tail is None else tail
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    @property
    def tail(self) -> Cell:
        """The cdr, which must itself be a cell."""
        if not isinstance(self.cdr, Cell):
            raise YallTypeError(f"Improper list: {self}")
        return self.cdr

    @property
    def cadr(self) -> Expr:
        return self.tail.car

    @property
    def cddr(self) -> Expr:
        return self.tail.cdr

    @property
    def caddr(self) -> Expr:
        return self.tail.tail.car

    def __iter__(self) -> Iterator[Expr]:
        cell = self
        while cell is not Empty:
            yield cell.car
            cell = cell.tail

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        # a Cell is always a value; use `is Empty` for emptiness
        return True

    def __str__(self) -> str:
        if self is Empty:
            return "()"
        with StringIO() as buffer:
            buffer.write("(")
            cell = self
            while True:
                buffer.write(str(cell.car))
                rest = cell.cdr
                if rest is Empty:
                    break
                if isinstance(rest, Cell):
                    buffer.write(" ")
                    cell = rest
                    continue
                buffer.write(" . ")
                buffer.write(str(rest))
                break
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Cell({self})"


Empty = Cell(None, None)
