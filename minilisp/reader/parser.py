"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing over a token iterator
- Emits minilisp values directly (code is data):

    - nil, ()        -> Nil
    - true / false   -> bool
    - integers       -> int (signed 64-bit range)
    - strings        -> str (escapes: \\n \\\\ \\")
    - symbols        -> Symbol
    - lists          -> Pair chains terminated by Nil
    - dotted lists   -> Pair chains terminated by the cdr
    - 'expr          -> (quote expr)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from minilisp import SExpression, INT64_MAX, INT64_MIN
from minilisp.errors import LispReadError, LispRecursionError
from minilisp.lists import from_sequence
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<atom>[^\s()\'";]+)'  # numbers, booleans, nil, symbols, '.'
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+")

SYMBOL_PUNCTUATION = frozenset("_-+*?=/!&|")

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "\\": "\\",
    '"': '"',
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise LispReadError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("quote", "lparen", "rparen", "string", "atom"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def _is_symbol_start(c: str) -> bool:
    return c.isalpha() or c in SYMBOL_PUNCTUATION


def _is_symbol_char(c: str) -> bool:
    return _is_symbol_start(c) or c.isnumeric()


def read_string(token: str) -> str:
    """Decode the body of a double-quoted string token."""
    out: list[str] = []
    body = token[1:-1]
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\":
            esc = body[i + 1]
            if esc not in STRING_ESCAPES:
                raise LispReadError(f"Unknown escape \\{esc} in string {token}")
            out.append(STRING_ESCAPES[esc])
            i += 2
        else:
            out.append(c)
            i += 1
    return "".join(out)


def read_atom(token: str) -> SExpression:
    if token == "true":
        return True
    if token == "false":
        return False
    if token == "nil":
        return Nil
    if INT_RE.fullmatch(token):
        value = int(token)
        if not INT64_MIN <= value <= INT64_MAX:
            raise LispReadError(f"Integer literal out of range: {token}")
        return value
    if _is_symbol_start(token[0]) and all(_is_symbol_char(c) for c in token[1:]):
        return Symbol(token)
    raise LispReadError(f"Invalid token: {token!r}")


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[SExpression]:
        """Parse the next expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "atom":
            self.advance()
            if tok_val == ".":
                raise LispReadError("Unexpected '.' outside of a list")
            return read_atom(tok_val)

        if tok_type == "string":
            self.advance()
            return read_string(tok_val)

        if tok_type == "quote":
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise LispReadError("Expected an expression after quote")
            return from_sequence([QUOTE, expr])

        if tok_type == "lparen":
            self.advance()
            return self._parse_list()

        if tok_type == "rparen":
            raise LispReadError("Unmatched ')'")

        raise LispReadError(f"Unknown token: {tok_type} {tok_val}")

    def _parse_list(self) -> SExpression:
        items: list[SExpression] = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise LispReadError("Unmatched '('")
            if tok_type == "rparen":
                self.advance()
                return from_sequence(items)
            if tok_type == "atom" and tok_val == ".":
                if not items:
                    raise LispReadError("Expected an expression before '.'")
                self.advance()
                if self.peek()[0] in (None, "rparen"):
                    raise LispReadError("Expected an expression after '.'")
                cdr_expr = self.parse_expr()
                if self.peek()[0] != "rparen":
                    raise LispReadError("Expected ')' after dotted cdr")
                self.advance()
                return from_sequence(items, cdr_expr)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            try:
                expr = self.parse_expr()
            except RecursionError:
                raise LispRecursionError("input is nested too deeply to read") from None
            yield expr


def parse(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
