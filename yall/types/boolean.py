from __future__ import annotations


class Bool:
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def __repr__(self): return "TRUE" if self.value else "FALSE"
    def __str__(self): return "#t" if self.value else "#f"


TRUE = Bool(True)
FALSE = Bool(False)


def to_bool(value: bool) -> Bool:
    return TRUE if value else FALSE
