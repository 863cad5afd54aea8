"""Core evaluator for the minilisp interpreter.

A single recursive step over (expression, scope path): functions and
non-symbol atoms evaluate to themselves, symbols resolve through the builtin
registry and then the scope path, and pairs are either special forms or
call-by-value applications. There is no tail-call elimination; recursion depth
is bounded by the host stack, so a Lisp call costs as few Python frames as
possible: arguments are evaluated inline and lambda bodies are evaluated here
rather than in a helper.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue, is_atom
from minilisp.builtin import registry
from minilisp.errors import LispSyntaxError, LispTypeError, LispUnboundSymbol
from minilisp.evaluation.apply import bind_arguments, check_callable, invoke_builtin
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.lists import from_sequence, to_sequence
from minilisp.printer import render
from minilisp.types.function import BuiltIn, Lambda
from minilisp.types.pair import Pair
from minilisp.types.scope import ScopePath, ScopeStore
from minilisp.types.symbol import Symbol


def resolve_symbol(symbol: Symbol, scopes: ScopeStore, path: ScopePath) -> LispValue:
    # Builtins are checked first and can never be shadowed.
    builtin = registry.lookup(symbol.name)
    if builtin is not None:
        return builtin
    value = scopes.resolve(path, symbol.name)
    if value is None:
        raise LispUnboundSymbol(symbol.name)
    return value


def evaluate_value(expr: SExpression, scopes: ScopeStore, path: ScopePath) -> LispValue:
    """Evaluate `expr` where a value is required (operators, arguments)."""
    value = evaluate(expr, scopes, path)
    if value is None:
        raise LispSyntaxError(f"expression produces no value: {render(expr)}")
    return value


def evaluate(expr: SExpression, scopes: ScopeStore, path: ScopePath) -> LispValue | None:
    """
    Evaluate one expression under `path`.
    Returns None only when the expression is (or ends in) a definition.
    """
    match expr:
        case BuiltIn() | Lambda():
            return expr

        case Symbol():
            return resolve_symbol(expr, scopes, path)

        case Pair(first=op, rest=args):
            # --- Special forms handling ---
            if isinstance(op, Symbol) and op in SPECIAL_FORMS:
                return SPECIAL_FORMS[op](args, scopes, path, evaluate)

            fn = check_callable(evaluate_value(op, scopes, path), expr)

            # Call-by-value, left to right, under the caller's path.
            values = []
            for arg in to_sequence(args):
                value = evaluate(arg, scopes, path)
                if value is None:
                    raise LispSyntaxError(f"expression produces no value: {render(arg)}")
                values.append(value)
            arg_list = from_sequence(values)

            if isinstance(fn, Lambda):
                return evaluate(fn.body, scopes, bind_arguments(fn, arg_list, scopes))
            return invoke_builtin(fn, arg_list)

    # --- Atoms return as-is ---
    if is_atom(expr):
        return expr
    raise LispTypeError(f"cannot evaluate a non-minilisp value: {expr!r}")
