from __future__ import annotations

from yall import Expr
from yall.types.atoms import Integer, String
from yall.types.boolean import Bool
from yall.types.callables import Function, Macro, SpecialForm
from yall.types.cell import Cell
from yall.types.symbol import Symbol


class Type:
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Type({self.name!r})"

    def __str__(self):
        return f"<{self.name}>"


TYPE_CELL = Type("cell")
TYPE_SYMBOL = Type("symbol")
TYPE_INTEGER = Type("integer")
TYPE_STRING = Type("string")
TYPE_FUNCTION = Type("function")
TYPE_MACRO = Type("macro")
TYPE_SPECIAL_FORM = Type("special-form")
TYPE_BOOL = Type("bool")
TYPE_TYPE = Type("type")
TYPE_UNKNOWN = Type("unknown")


def type_of(expr: Expr) -> Type:
    match expr:
        case Cell():
            return TYPE_CELL
        case Symbol():
            return TYPE_SYMBOL
        case Integer():
            return TYPE_INTEGER
        case String():
            return TYPE_STRING
        case Function():
            return TYPE_FUNCTION
        case Macro():
            return TYPE_MACRO
        case SpecialForm():
            return TYPE_SPECIAL_FORM
        case Bool():
            return TYPE_BOOL
        case Type():
            return TYPE_TYPE
    return TYPE_UNKNOWN
