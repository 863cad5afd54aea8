"""Application engine for minilisp.

Centralizes function application for the evaluator:
- BuiltIn tags are dispatched to the builtin registry with the argument list.
- Lambdas get a fresh invocation scope holding their parameters, appended to
  the path they captured when the lambda form was evaluated. The caller's
  path plays no part in resolving names inside the body.

The evaluator runs the lambda body itself on the path returned by
`bind_arguments`, which keeps each Lisp call to as few host frames as
possible.
"""

from __future__ import annotations

from minilisp import LispValue, is_function
from minilisp.builtin import registry
from minilisp.errors import LispArityError, LispNotCallable
from minilisp.lists import to_sequence
from minilisp.printer import render
from minilisp.types.function import BuiltIn, Lambda
from minilisp.types.scope import ScopePath, ScopeStore


def bind_arguments(fn: Lambda, args: LispValue, scopes: ScopeStore) -> ScopePath:
    """Bind evaluated arguments to the parameters of `fn` in a new scope.

    Parameters:
    - fn: The Lambda being applied.
    - args: The evaluated arguments as a proper Lisp list.
    - scopes: The scope store owning every scope on fn.scope_path.

    Returns the path the body is evaluated under: the captured path with the
    invocation scope appended. Raises LispArityError unless exactly one
    argument per parameter is given.
    """
    values = to_sequence(args)
    if len(values) != fn.arity:
        raise LispArityError(render(fn), fn.arity, len(values))

    scope_id = scopes.create_scope()
    for name, value in zip(fn.params, values):
        scopes.define(scope_id, name, value)
    return fn.scope_path.push(scope_id)


def check_callable(fn: LispValue, form: LispValue) -> BuiltIn | Lambda:
    if not is_function(fn):
        raise LispNotCallable(fn, f"value in operator position cannot be called: {render(form)}")
    return fn


def invoke_builtin(fn: BuiltIn, args: LispValue) -> LispValue:
    return registry.invoke(fn, args)
