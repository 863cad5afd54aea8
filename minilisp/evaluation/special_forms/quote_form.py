from __future__ import annotations

from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.lists import head
from minilisp.types.scope import ScopePath, ScopeStore


def quote_form(
    tail: SExpression, scopes: ScopeStore, path: ScopePath, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (quote datum)
    Returns datum unevaluated. Anything after the first operand is ignored.
    """
    return head(tail)
