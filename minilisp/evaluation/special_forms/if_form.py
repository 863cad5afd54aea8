from __future__ import annotations

from minilisp import EvaluatorFn, is_boolean
from minilisp import SExpression, LispValue
from minilisp.errors import LispSyntaxError, LispTypeError
from minilisp.lists import length, take3
from minilisp.printer import render
from minilisp.types.scope import ScopePath, ScopeStore


def if_form(
    tail: SExpression,
    scopes: ScopeStore,
    path: ScopePath,
    evaluate_fn: EvaluatorFn,
) -> LispValue | None:
    if length(tail) != 3:
        raise LispSyntaxError(f"if requires a condition, a then-branch and an else-branch: {render(tail)}")

    condition, if_true, if_false = take3(tail)
    cond = evaluate_fn(condition, scopes, path)
    # No truthiness: only booleans select a branch.
    if not is_boolean(cond):
        shown = "no value" if cond is None else render(cond)
        raise LispTypeError(f"if condition must be a boolean, got {shown}")

    if cond:
        return evaluate_fn(if_true, scopes, path)
    return evaluate_fn(if_false, scopes, path)
