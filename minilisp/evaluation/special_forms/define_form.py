from minilisp import EvaluatorFn, is_symbol
from minilisp import SExpression
from minilisp.errors import LispSyntaxError
from minilisp.lists import length, take2
from minilisp.printer import render
from minilisp.types.scope import ScopePath, ScopeStore


def define_form(
    tail: SExpression,
    scopes: ScopeStore,
    path: ScopePath,
    evaluate_fn: EvaluatorFn,
) -> None:
    """
    (define name value)
    Binds into the innermost scope of the current path: the top level at top
    level, the invocation scope inside a lambda body. Produces no value.
    """
    if length(tail) != 2:
        raise LispSyntaxError(f"define requires exactly 2 operands: (define {render(tail)[1:]}")

    name, val_expr = take2(tail)
    if not is_symbol(name):
        raise LispSyntaxError(f"define expects a symbol, got {render(name)}")
    value = evaluate_fn(val_expr, scopes, path)
    if value is None:
        raise LispSyntaxError(f"define of {name} has no value: {render(val_expr)}")
    scopes.define(path.current, name.name, value)
    return None
