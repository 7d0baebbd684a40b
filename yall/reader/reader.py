"""
  yall Reader: tokenizer and recursive-descent parser

- Lazy: reads one character at a time from a text stream and parses exactly
  one expression per `read()` call, so the rest of the stream stays unread.
- Every `read()` reports how many characters it consumed, including the
  whitespace it skipped. A delimiter that terminates a bare token is pushed
  back and is not counted until the next call reads it.
- Emits yall values:

    - lists      -> Cell chains terminated by Empty
    - integers   -> Integer (base 10, optional sign, 64-bit)
    - strings    -> String (quotes stripped, escapes left as written)
    - quotes     -> Quoted / Quasiquoted / Unquoted / SplicingUnquoted
    - all else   -> Symbol (`.`, `[`, `]`, `+`, `:key`, `#t` ...)
"""

from __future__ import annotations

import io
import re
from typing import Iterator, TextIO

from yall import Expr
from yall.errors import YallEndOfInput, YallSyntaxError
from yall.types.atoms import INT_MAX, INT_MIN, Integer, String
from yall.types.cell import Cell
from yall.types.quoted import PREFIXES
from yall.types.symbol import Symbol

DELIMITERS = frozenset("()[]'`")
WHITESPACE = frozenset(" \t\r\n")
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_string(token: str) -> bool:
    return len(token) >= 2 and token.startswith('"') and token.endswith('"')


def parse_atom(token: str) -> Expr:
    """Turn a bare or string token into an Integer, String or Symbol."""
    if INTEGER_RE.fullmatch(token):
        value = int(token)
        if INT_MIN <= value <= INT_MAX:
            return Integer(value)
    if is_string(token):
        return String(token[1:-1])
    return Symbol(token)


class Reader:
    def __init__(self, stream: TextIO):
        self.stream = stream
        self._pushed: list[str] = []

    # ------------------------
    # Characters
    # ------------------------
    def _read_char(self) -> str:
        if self._pushed:
            return self._pushed.pop()
        return self.stream.read(1)

    def _unread_char(self, c: str) -> None:
        self._pushed.append(c)

    # ------------------------
    # Tokens
    # ------------------------
    def _next_string(self) -> tuple[str, int]:
        """Scan a string literal whose opening quote was already consumed."""
        chars = ['"']
        size = 0
        escaped = False
        while True:
            c = self._read_char()
            if not c:
                raise YallSyntaxError("Unexpected EOS in string")
            size += 1
            chars.append(c)
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == '"':
                return "".join(chars), size

    def next_token(self) -> tuple[str, int]:
        """Return the next token and the number of characters consumed for it.

        Raises YallEndOfInput when the stream ends before any token starts.
        """
        buffer: list[str] = []
        size = 0
        while True:
            c = self._read_char()
            if not c:
                if buffer:
                    return "".join(buffer), size
                raise YallEndOfInput("Unexpected end of input")
            size += 1

            if c in WHITESPACE:
                if buffer:
                    return "".join(buffer), size
                continue

            # delimiters, commas and quotes end a pending bare token
            if buffer and (c in DELIMITERS or c in ',"'):
                self._unread_char(c)
                return "".join(buffer), size - 1

            if c in DELIMITERS:
                return c, size

            if c == ",":
                maybe_at = self._read_char()
                if maybe_at == "@":
                    return ",@", size + 1
                if maybe_at:
                    self._unread_char(maybe_at)
                return ",", size

            if c == '"':
                token, string_size = self._next_string()
                return token, size + string_size

            buffer.append(c)

    def tokens(self) -> Iterator[str]:
        while True:
            try:
                token, _ = self.next_token()
            except YallEndOfInput:
                return
            yield token

    # ------------------------
    # Expressions
    # ------------------------
    def _next_inner_token(self) -> tuple[str, int]:
        """next_token, for positions where the expression is incomplete."""
        try:
            return self.next_token()
        except YallEndOfInput:
            raise YallSyntaxError("Unexpected end of input") from None

    def _parse(self, token: str) -> tuple[Expr, int]:
        """Parse the expression starting with `token`.

        Returns the expression and the characters consumed *after* `token`.
        """
        if token == "(":
            return self._read_list()
        if token == ")":
            raise YallSyntaxError("Unexpected end of list")
        wrapper = PREFIXES.get(token)
        if wrapper is not None:
            inner_token, size = self._next_inner_token()
            expr, inner_size = self._parse(inner_token)
            return wrapper(expr), size + inner_size
        return parse_atom(token), 0

    def _read_list(self) -> tuple[Cell, int]:
        items: list[Expr] = []
        size = 0
        while True:
            token, token_size = self._next_inner_token()
            size += token_size
            if token == ")":
                return Cell.from_iterable(items), size
            expr, expr_size = self._parse(token)
            items.append(expr)
            size += expr_size

    def read(self) -> tuple[Expr, int]:
        """Read one expression; return it with the number of characters consumed."""
        token, size = self.next_token()
        expr, rest_size = self._parse(token)
        return expr, size + rest_size

    def read_all(self) -> Iterator[Expr]:
        """Yield expressions until the stream ends cleanly between expressions."""
        while True:
            try:
                expr, _ = self.read()
            except YallEndOfInput:
                return
            yield expr


def read_from_string(source: str) -> tuple[Expr, int]:
    """Read the first expression of `source`; the rest is left unread."""
    return Reader(io.StringIO(source)).read()


def tokenize(source: str) -> list[str]:
    return list(Reader(io.StringIO(source)).tokens())
