import pytest

from yall.errors import YallTypeError, YallUnboundSymbol
from yall.evaluation.evaluator import eval_quasiquote, evaluate_string
from yall.reader.reader import read_from_string
from yall.types.atoms import Integer
from yall.types.cell import Cell, Empty
from yall.types.symbol import Symbol


@pytest.fixture
def bound(env):
    env.intern(Symbol("b"), Integer(3))
    evaluate_string(env, "(def c '(1 2))")
    return env


@pytest.mark.parametrize(
    "source,expected",
    [
        ("`a", "a"),
        ("`()", "()"),
        ("`(1 2 3)", "(1 2 3)"),
        ("`(a ,b c)", "(a 3 c)"),
        ("`(a ,b ,@c)", "(a 3 1 2)"),
        ("`(a ,@c)", "(a 1 2)"),
        ("`((x ,b) y)", "((x 3) y)"),
        ("`(,(+ b 1))", "(4)"),
        ("`,b", "3"),
        ("`(a 'b)", "(a 'b)"),
        ("`(a `b)", "(a `b)"),
    ]
)
def test_quasiquote(bound, source, expected):
    assert str(evaluate_string(bound, source)) == expected


def test_splice_only_looks_at_second_element(bound):
    # elements after the splice are not carried over
    assert str(evaluate_string(bound, "`(a ,@c z)")) == "(a 1 2)"
    # a splice in the first position is left as written
    assert str(evaluate_string(bound, "`(,@c a)")) == "(,@c a)"


def test_splice_in_nested_list(bound):
    assert str(evaluate_string(bound, "`(x (y ,@c))")) == "(x (y 1 2))"


def test_splice_shares_the_spliced_list(bound):
    result = evaluate_string(bound, "`(a ,@c)")
    assert result.cdr is bound.lookup(Symbol("c"))


def test_splice_of_empty_list(bound):
    assert str(evaluate_string(bound, "`(a ,@())")) == "(a)"


def test_splice_requires_a_list(bound):
    with pytest.raises(YallTypeError, match="Invalid splicing unquote"):
        evaluate_string(bound, "`(a ,@b)")


def test_unquote_of_unbound_symbol(env):
    with pytest.raises(YallUnboundSymbol):
        evaluate_string(env, "`(a ,nope)")


def test_quasiquote_builds_new_cells(bound):
    template, _ = read_from_string("(a ,b c)")
    result = eval_quasiquote(template, bound)
    assert result is not template
    assert isinstance(result, Cell)
    assert result.car == Symbol("a")
    assert result.cadr == Integer(3)


def test_unquote_evaluates_in_current_environment(env):
    evaluate_string(env, "(def f (fn (x) `(got ,x)))")
    assert str(evaluate_string(env, "(f 7)")) == "(got 7)"


def test_quote_returns_expression_unevaluated(env):
    result = evaluate_string(env, "'(+ 1 2)")
    assert str(result) == "(+ 1 2)"
    assert result.cddr.cdr is Empty
