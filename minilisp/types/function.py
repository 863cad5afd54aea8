"""Callable values: native builtins and user-defined closures."""

from __future__ import annotations

from enum import Enum

from minilisp import SExpression
from minilisp.types.pair import values_equal
from minilisp.types.scope import ScopePath


class BuiltIn(Enum):
    """Native procedures, keyed by the symbol that names them."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    EQ = "="
    PRINTLN = "println"

    def __str__(self) -> str:
        return self.value


class Lambda:
    """A first-class closure: formal parameters, body, and captured scope path."""

    __slots__ = ("params", "body", "scope_path")

    def __init__(self, params: list[str], body: SExpression, scope_path: ScopePath):
        self.params: tuple[str, ...] = tuple(params)
        self.body: SExpression = body
        self.scope_path: ScopePath = scope_path

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and self.scope_path == other.scope_path
            and values_equal(self.body, other.body)
        )

    __hash__ = None

    def __str__(self) -> str:
        from minilisp.printer import render
        return render(self)

    def __repr__(self) -> str:
        return f"Lambda({list(self.params)!r}, {self.body!r}, {self.scope_path!r})"
