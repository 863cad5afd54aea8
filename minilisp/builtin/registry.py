"""Built-in procedures for the minilisp runtime.

Every builtin receives its evaluated arguments as a single Lisp list, checks
the exact arity, then matches on the atom kinds of its operands.
"""
from __future__ import annotations

from typing import Callable, Optional

from minilisp import LispValue, INT64_MAX, INT64_MIN, is_integer
from minilisp import lists
from minilisp.errors import LispArityError, LispOverflowError, LispSyntaxError, LispTypeError
from minilisp.printer import render
from minilisp.types.function import BuiltIn
from minilisp.types.nil import Nil

_BY_NAME: dict[str, BuiltIn] = {b.value: b for b in BuiltIn}


def lookup(name: str) -> Optional[BuiltIn]:
    """Return the builtin spelled `name`, or None for any other name."""
    return _BY_NAME.get(name)


def check_args_length(name: str, args: LispValue, required: int) -> list[LispValue]:
    if not lists.is_list(args):
        raise LispSyntaxError(f"arguments is not in a list: {render(args)}")
    found = lists.length(args)
    if found != required:
        raise LispArityError(name, required, found)
    return lists.to_sequence(args)


def _int64(name: str, result: int) -> int:
    if not INT64_MIN <= result <= INT64_MAX:
        raise LispOverflowError(f"integer overflow in {name}: {result}")
    return result


def _integer_operands(name: str, args: LispValue) -> tuple[int, int]:
    lhs, rhs = check_args_length(name, args, 2)
    if not (is_integer(lhs) and is_integer(rhs)):
        raise LispTypeError(f"incorrect types in arguments to {name}: {render(args)}")
    return lhs, rhs


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: LispValue) -> LispValue:
    lhs, rhs = _integer_operands("+", args)
    return _int64("+", lhs + rhs)


def sub(args: LispValue) -> LispValue:
    lhs, rhs = _integer_operands("-", args)
    return _int64("-", lhs - rhs)


def mul(args: LispValue) -> LispValue:
    lhs, rhs = _integer_operands("*", args)
    return _int64("*", lhs * rhs)


# -------------------------------
# Comparison
# -------------------------------
def eq(args: LispValue) -> LispValue:
    lhs, rhs = _integer_operands("=", args)
    return lhs == rhs


# -------------------------------
# I/O
# -------------------------------
def println(args: LispValue) -> LispValue:
    """Write the rendered argument and a newline to stdout; returns Nil."""
    (arg,) = check_args_length("println", args, 1)
    print(render(arg))
    return Nil


_DISPATCH: dict[BuiltIn, Callable[[LispValue], LispValue]] = {
    BuiltIn.ADD: add,
    BuiltIn.SUB: sub,
    BuiltIn.MUL: mul,
    BuiltIn.EQ: eq,
    BuiltIn.PRINTLN: println,
}


def invoke(tag: BuiltIn, args: LispValue) -> LispValue:
    return _DISPATCH[tag](args)
