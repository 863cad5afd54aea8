from __future__ import annotations

import logging

from minilisp import LispValue
from minilisp.reader.parser import lex, TokenStream
from minilisp.runtime import Runtime
from minilisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads minilisp source and evaluates it form by form against one Runtime.
    The first failing form stops the run; earlier bindings stay in place.
    """

    def __init__(self, runtime: Runtime | None = None, prelude: str | None = None):
        self.runtime = runtime if runtime is not None else Runtime()
        if prelude:
            self.run(prelude)

    def run(self, code: str) -> list[LispValue | None]:
        """Evaluate every form in `code`; one result per form (None for definitions)."""
        stream = TokenStream(lex(code))
        results: list[LispValue | None] = []
        for expr in stream.parse_all():
            results.append(self.runtime.evaluate(expr))
        logger.debug("evaluated %d top-level forms", len(results))
        return results

    def eval(self, code: str) -> LispValue | None:
        """Evaluate `code`; Nil for no forms, the value for one, a list for several."""
        results = self.run(code)
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results

    def lookup(self, name: str) -> LispValue | None:
        return self.runtime.lookup_top_level(name)
