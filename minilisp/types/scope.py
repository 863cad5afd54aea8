"""Scope store for minilisp.

Scopes live in a flat, append-only arena addressed by integer id. A ScopePath
is an immutable chain of ids from the top level (id 0) to the innermost scope
in effect; name resolution walks it from innermost to outermost.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from minilisp import LispValue
from minilisp.errors import LispScopeError

TOP_LEVEL = 0


class Scope:
    """A single level of name -> value bindings."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, LispValue] = {}

    def define(self, name: str, value: LispValue) -> None:
        self.vars[name] = value

    def get(self, name: str) -> Optional[LispValue]:
        return self.vars.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()


class ScopePath:
    """Immutable, non-empty chain of scope ids; the first is always 0."""

    __slots__ = ("ids",)

    def __init__(self, ids: tuple[int, ...] = (TOP_LEVEL,)):
        if not ids or ids[0] != TOP_LEVEL:
            raise LispScopeError(f"scope path must start at the top level: {ids}")
        object.__setattr__(self, "ids", tuple(ids))

    def __setattr__(self, key, value):
        raise AttributeError("ScopePath is immutable")

    def push(self, scope_id: int) -> ScopePath:
        """Return a new path with `scope_id` as the innermost scope."""
        return ScopePath(self.ids + (scope_id,))

    @property
    def current(self) -> int:
        return self.ids[-1]

    def innermost_first(self) -> Iterator[int]:
        return reversed(self.ids)

    def __len__(self) -> int:
        return len(self.ids)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ScopePath) and self.ids == other.ids

    def __hash__(self) -> int:
        return hash(self.ids)

    def __repr__(self) -> str:
        return f"ScopePath({list(self.ids)})"


class ScopeStore:
    """Growable arena of scopes. Scope 0 is the top-level environment."""

    __slots__ = ("scopes",)

    def __init__(self):
        self.scopes: list[Scope] = [Scope()]

    def create_scope(self) -> int:
        """Allocate a new empty scope and return its id."""
        self.scopes.append(Scope())
        return len(self.scopes) - 1

    def _scope(self, scope_id: int) -> Scope:
        if not 0 <= scope_id < len(self.scopes):
            raise LispScopeError(f"no scope with id {scope_id}")
        return self.scopes[scope_id]

    def define(self, scope_id: int, name: str, value: LispValue) -> None:
        """Insert or overwrite `name` in exactly the scope `scope_id`."""
        self._scope(scope_id).define(name, value)

    def resolve(self, path: ScopePath, name: str) -> Optional[LispValue]:
        """Return the innermost binding of `name` along `path`, or None."""
        for scope_id in path.innermost_first():
            scope = self._scope(scope_id)
            if name in scope:
                return scope.vars[name]
        return None

    def top_level(self, name: str) -> Optional[LispValue]:
        return self.scopes[TOP_LEVEL].get(name)

    def __len__(self) -> int:
        return len(self.scopes)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<ScopeStore ")
            buffer.write(" | ".join(f"{i}: {s}" for i, s in enumerate(self.scopes)))
            buffer.write(">")
            return buffer.getvalue()
