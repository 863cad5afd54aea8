import pytest

from minilisp.errors import (
    LispEmptyListError,
    LispNotAListError,
    LispSyntaxError,
    LispTypeError,
    LispUnboundSymbol,
)
from minilisp.types.function import Lambda
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair

from conftest import lst, sym


# ------------------ quote ------------------

def test_quote_returns_operand_unevaluated(runtime):
    datum = lst(sym("undefined-fn"), 1, 2)
    assert runtime.evaluate(lst(sym("quote"), datum)) == datum


def test_quote_ignores_extra_operands(runtime):
    assert runtime.evaluate(lst(sym("quote"), sym("a"), sym("b"))) == sym("a")


def test_quote_without_operand(runtime):
    with pytest.raises(LispEmptyListError):
        runtime.evaluate(lst(sym("quote")))


# ------------------ define ------------------

def test_define_produces_no_value(runtime):
    assert runtime.evaluate(lst(sym("define"), sym("a"), 10)) is None
    assert runtime.lookup_top_level("a") == 10


def test_define_evaluates_value(runtime):
    runtime.evaluate(lst(sym("define"), sym("a"), lst(sym("+"), 1, 2)))
    assert runtime.evaluate(sym("a")) == 3


def test_define_requires_symbol(runtime):
    with pytest.raises(LispSyntaxError, match="symbol"):
        runtime.evaluate(lst(sym("define"), "a", 1))


@pytest.mark.parametrize("operands", [[sym("a")], [sym("a"), 1, 2], []])
def test_define_shape(runtime, operands):
    with pytest.raises(LispSyntaxError):
        runtime.evaluate(lst(sym("define"), *operands))


def test_define_value_must_produce_a_value(runtime):
    with pytest.raises(LispSyntaxError):
        runtime.evaluate(lst(sym("define"), sym("a"), lst(sym("define"), sym("b"), 1)))


def test_define_special_form_name_as_variable_does_not_shadow(runtime):
    runtime.evaluate(lst(sym("define"), sym("quote"), 5))
    assert runtime.evaluate(lst(sym("quote"), sym("z"))) == sym("z")


def test_define_inside_body_is_local_to_invocation(runtime):
    # (define f (lambda (n) (if true (define local n) 0)))
    body = lst(sym("if"), True, lst(sym("define"), sym("local"), sym("n")), 0)
    runtime.evaluate(lst(sym("define"), sym("f"), lst(sym("lambda"), lst(sym("n")), body)))
    assert runtime.evaluate(lst(sym("f"), 1)) is None
    assert runtime.lookup_top_level("local") is None


def test_shadowing_does_not_mutate_outer_binding(runtime):
    runtime.evaluate(lst(sym("define"), sym("x"), 1))
    runtime.evaluate(lst(sym("define"), sym("f"), lst(sym("lambda"), lst(sym("x")), sym("x"))))
    assert runtime.evaluate(lst(sym("f"), 2)) == 2
    assert runtime.evaluate(sym("x")) == 1


# ------------------ lambda ------------------

def test_lambda_records_params_and_body(runtime):
    body = lst(sym("+"), sym("a"), sym("b"))
    lam = runtime.evaluate(lst(sym("lambda"), lst(sym("a"), sym("b")), body))
    assert isinstance(lam, Lambda)
    assert lam.params == ("a", "b")
    assert lam.body == body
    assert lam.scope_path.ids[0] == 0
    assert len(lam.scope_path) == 2


def test_lambda_params_must_be_symbols(runtime):
    with pytest.raises(LispSyntaxError, match="symbol"):
        runtime.evaluate(lst(sym("lambda"), lst(sym("a"), 1), sym("a")))


def test_lambda_params_must_be_proper_list(runtime):
    with pytest.raises(LispNotAListError):
        runtime.evaluate(lst(sym("lambda"), Pair(sym("a"), sym("b")), sym("a")))


@pytest.mark.parametrize("operands", [[lst(sym("a"))], [lst(sym("a")), 1, 2]])
def test_lambda_shape(runtime, operands):
    with pytest.raises(LispSyntaxError):
        runtime.evaluate(lst(sym("lambda"), *operands))


def test_zero_argument_lambda(runtime):
    assert runtime.evaluate(lst(lst(sym("lambda"), Nil, 9))) == 9


# ------------------ if ------------------

def test_if_selects_branch(runtime):
    assert runtime.evaluate(lst(sym("if"), True, 1, 2)) == 1
    assert runtime.evaluate(lst(sym("if"), False, 1, 2)) == 2
    assert runtime.evaluate(lst(sym("if"), lst(sym("="), 1, 1), "yes", "no")) == "yes"


@pytest.mark.parametrize("condition", [0, 1, Nil, "true", lst(sym("quote"), sym("a"))])
def test_if_requires_boolean(runtime, condition):
    with pytest.raises(LispTypeError):
        runtime.evaluate(lst(sym("if"), condition, 1, 2))


def test_if_never_evaluates_other_branch(runtime, capsys):
    expr = lst(sym("if"), True, 1, lst(sym("println"), "else"))
    assert runtime.evaluate(expr) == 1
    assert runtime.evaluate(lst(sym("if"), False, sym("unbound"), 2)) == 2
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("operands", [[True, 1], [True, 1, 2, 3]])
def test_if_shape(runtime, operands):
    with pytest.raises(LispSyntaxError):
        runtime.evaluate(lst(sym("if"), *operands))


def test_define_in_one_call_is_invisible_to_the_next(runtime):
    # (define f (lambda (n first) (if first (define seen n) seen)))
    body = lst(sym("if"), sym("first"), lst(sym("define"), sym("seen"), sym("n")), sym("seen"))
    runtime.evaluate(lst(sym("define"), sym("f"), lst(sym("lambda"), lst(sym("n"), sym("first")), body)))
    assert runtime.evaluate(lst(sym("f"), 1, True)) is None
    with pytest.raises(LispUnboundSymbol) as excinfo:
        runtime.evaluate(lst(sym("f"), 2, False))
    assert excinfo.value.name == "seen"
