"""Integer and String atoms."""

from __future__ import annotations

INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def wrap_int(value: int) -> int:
    """Wrap `value` into the signed 64-bit range, two's complement style."""
    return (value - INT_MIN) % (1 << INT_BITS) + INT_MIN


class Integer:
    """A fixed-width signed integer. `inc!` is the only thing that mutates one."""

    __slots__ = ("_value",)

    def __init__(self, value: int):
        self._value = wrap_int(value)

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> Integer:
        self._value = wrap_int(self._value + 1)
        return self

    def __eq__(self, other) -> bool:
        return isinstance(other, Integer) and self._value == other._value

    # mutable, so unhashable
    __hash__ = None

    def __repr__(self):
        return f"Integer({self._value})"

    def __str__(self):
        return str(self._value)


class String:
    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, String) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"String({self.value!r})"

    def __str__(self):
        return '"' + self.value + '"'
