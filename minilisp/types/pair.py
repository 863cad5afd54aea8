"""Immutable cons cell, the spine of every list."""

from __future__ import annotations

from minilisp import LispValue


class Pair:
    """An ordered pair of shared references (`first`, `rest`)."""

    __slots__ = ("first", "rest")

    def __init__(self, first: LispValue, rest: LispValue):
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "rest", rest)

    def __setattr__(self, key, value):
        raise AttributeError("Pair is immutable")

    def __delattr__(self, key):
        raise AttributeError("Pair is immutable")

    def __eq__(self, other: object) -> bool:
        # Walk the spine iteratively so long lists do not recurse per element.
        a, b = self, other
        while isinstance(a, Pair):
            if not isinstance(b, Pair):
                return False
            if a is b:
                return True
            if not values_equal(a.first, b.first):
                return False
            a, b = a.rest, b.rest
        return values_equal(a, b)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Pair({self.first!r}, {self.rest!r})"


def values_equal(a: LispValue, b: LispValue) -> bool:
    # True == 1 in Python; booleans and integers are distinct atom kinds.
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b
