"""List utilities over pair chains.

Proper lists are pair chains terminated by Nil. Everything here except
`from_sequence` and `is_list` assumes properness and raises
LispNotAListError when the spine ends in any other atom.
"""

from __future__ import annotations

from typing import Callable, Iterable

from minilisp import LispValue
from minilisp.errors import LispEmptyListError, LispNotAListError
from minilisp.types.nil import Nil, NilType
from minilisp.types.pair import Pair


def from_sequence(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list from `items`, terminated by `tail` (Nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def to_sequence(lst: LispValue) -> list[LispValue]:
    """Return the elements of a proper list as a Python list."""
    items: list[LispValue] = []
    node = lst
    while isinstance(node, Pair):
        items.append(node.first)
        node = node.rest
    if not isinstance(node, NilType):
        raise LispNotAListError(f"not a list: {_show(lst)}")
    return items


def is_list(value: LispValue) -> bool:
    node = value
    while isinstance(node, Pair):
        node = node.rest
    return isinstance(node, NilType)


def length(lst: LispValue) -> int:
    count = 0
    node = lst
    while isinstance(node, Pair):
        count += 1
        node = node.rest
    if not isinstance(node, NilType):
        raise LispNotAListError(f"not a list: {_show(lst)}")
    return count


def map_list(lst: LispValue, fn: Callable[[LispValue], LispValue]) -> LispValue:
    """Apply `fn` to every element, left to right, producing a new proper list."""
    return from_sequence(fn(item) for item in to_sequence(lst))


def head(lst: LispValue) -> LispValue:
    first, _ = split_head(lst)
    return first


def split_head(lst: LispValue) -> tuple[LispValue, LispValue]:
    """Return (first, rest) of a non-empty list."""
    if isinstance(lst, Pair):
        return lst.first, lst.rest
    if isinstance(lst, NilType):
        raise LispEmptyListError("list is empty")
    raise LispNotAListError(f"not a list: {_show(lst)}")


def take2(lst: LispValue) -> tuple[LispValue, LispValue]:
    first, rest = split_head(lst)
    second, _ = split_head(rest)
    return first, second


def take3(lst: LispValue) -> tuple[LispValue, LispValue, LispValue]:
    first, rest = split_head(lst)
    second, rest = split_head(rest)
    third, _ = split_head(rest)
    return first, second, third


def _show(value: LispValue) -> str:
    from minilisp.printer import render
    return render(value)
