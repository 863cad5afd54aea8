"""Runtime facade: the scope store plus top-level evaluation.

Every top-level form is evaluated under the path holding only scope 0. A
failing form raises; bindings committed by earlier forms are kept.
"""

from __future__ import annotations

import logging
from typing import Optional

from minilisp import SExpression, LispValue
from minilisp.errors import LispRecursionError
from minilisp.evaluation.evaluator import evaluate as evaluate_expr
from minilisp.printer import render
from minilisp.types.pair import Pair
from minilisp.types.scope import ScopePath, ScopeStore
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Runtime:
    """Owns the scopes of one run."""

    def __init__(self):
        self.scopes = ScopeStore()

    def evaluate(self, expr: SExpression) -> Optional[LispValue]:
        try:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("evaluating %s", render(expr))
            return evaluate_expr(expr, self.scopes, ScopePath())
        except RecursionError:
            # Rendering a form this deep could overflow again; name only its operator.
            raise LispRecursionError(f"maximum recursion depth exceeded in {_describe(expr)}") from None

    def lookup_top_level(self, name: str) -> Optional[LispValue]:
        return self.scopes.top_level(name)


def _describe(expr: SExpression) -> str:
    if isinstance(expr, Pair) and isinstance(expr.first, Symbol):
        return f"({expr.first} ...)"
    return "top-level form"


def create_runtime() -> Runtime:
    return Runtime()


def evaluate(runtime: Runtime, expr: SExpression) -> Optional[LispValue]:
    return runtime.evaluate(expr)


def lookup_top_level(runtime: Runtime, name: str) -> Optional[LispValue]:
    return runtime.lookup_top_level(name)
