# Core type aliases and value predicates for minilisp's data model.
#
# Code and data share one representation (homoiconic):
# - Nil        -> the NilType singleton (also the empty list)
# - symbols    -> Symbol
# - strings    -> str
# - integers   -> int (64-bit signed range, never bool)
# - booleans   -> bool
# - pairs      -> Pair(first, rest)
# - functions  -> BuiltIn enum members and Lambda closures
#
# Naming guidance:
# - SExpression: a parsed, unevaluated form (reader output, special-form operands).
# - LispValue:  an evaluated runtime value.
# Both are the same union at runtime and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type used by special forms and closure application
EvaluatorFn = Callable[..., LispValue]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def is_integer(value: LispValue) -> bool:
    # bool is an int subclass; booleans are a distinct atom kind here.
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: LispValue) -> bool:
    return isinstance(value, bool)


def is_string(value: LispValue) -> bool:
    return isinstance(value, str)


def is_symbol(value: LispValue) -> bool:
    from minilisp.types.symbol import Symbol
    return isinstance(value, Symbol)


def is_function(value: LispValue) -> bool:
    from minilisp.types.function import BuiltIn, Lambda
    return isinstance(value, (BuiltIn, Lambda))


def is_atom(value: LispValue) -> bool:
    """Nil, symbols, strings, integers and booleans are atoms."""
    from minilisp.types.nil import NilType
    return (
        isinstance(value, NilType)
        or is_symbol(value)
        or is_string(value)
        or is_integer(value)
        or is_boolean(value)
    )
