"""Reader wrappers for the quote prefixes.

Each wrapper holds one expression and prints its prefix ahead of it, so
`''a` renders as two quote characters followed by `a`.
"""

from __future__ import annotations

from yall import Expr


class _Wrapper:
    __slots__ = ("expr",)
    prefix = ""

    def __init__(self, expr: Expr):
        self.expr = expr

    def __repr__(self):
        return f"{type(self).__name__}({self.expr!r})"

    def __str__(self):
        return self.prefix + str(self.expr)


class Quoted(_Wrapper):
    __slots__ = ()
    prefix = "'"


class Quasiquoted(_Wrapper):
    __slots__ = ()
    prefix = "`"


class Unquoted(_Wrapper):
    __slots__ = ()
    prefix = ","


class SplicingUnquoted(_Wrapper):
    __slots__ = ()
    prefix = ",@"


PREFIXES: dict[str, type[_Wrapper]] = {
    "'": Quoted,
    "`": Quasiquoted,
    ",": Unquoted,
    ",@": SplicingUnquoted,
}
