import pytest

from yall.errors import YallArityError, YallTypeError
from yall.evaluation.evaluator import evaluate_string
from yall.types.atoms import INT_MAX, INT_MIN
from yall.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", "3"),
        ("(+ 1 (* 2 3))", "7"),
        ("(+)", "0"),
        ("(*)", "1"),
        ("(+ 5)", "5"),
        ("(* 2 3 4)", "24"),
        ("(- 5)", "-5"),
        ("(- 10 3 2)", "5"),
        ("(- 0 -7)", "7"),
        ("(+ -1 -2 -3)", "-6"),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(-)", YallArityError),
        ("(+ 1 'a)", YallTypeError),
        ("(* 2 \"x\")", YallTypeError),
        ("(- 'a)", YallTypeError),
        ("(+ 1 ())", YallTypeError),
    ]
)
def test_arithmetic_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_overflow_wraps(run):
    assert run(f"(+ {INT_MAX} 1)") == str(INT_MIN)
    assert run(f"(- {INT_MIN} 1)") == str(INT_MAX)


def test_results_are_fresh_integers(env):
    evaluate_string(env, "(def a 1)")
    result = evaluate_string(env, "(+ a)")
    assert result is not env.lookup(Symbol("a"))
