from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispSyntaxError
from minilisp.lists import length, take2, to_sequence
from minilisp.printer import render
from minilisp.types.function import Lambda
from minilisp.types.scope import ScopePath, ScopeStore
from minilisp.types.symbol import Symbol


def lambda_form(
    tail: SExpression,
    scopes: ScopeStore,
    path: ScopePath,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body)
    A fresh scope is allocated every time the form is evaluated and becomes
    the innermost scope of the captured path.
    """
    if length(tail) != 2:
        raise LispSyntaxError(f"lambda requires a parameter list and one body: {render(tail)}")

    params, body = take2(tail)
    names: list[str] = []
    for param in to_sequence(params):
        if not isinstance(param, Symbol):
            raise LispSyntaxError(f"lambda parameter must be a symbol, got {render(param)}")
        names.append(param.name)

    return Lambda(names, body, path.push(scopes.create_scope()))
