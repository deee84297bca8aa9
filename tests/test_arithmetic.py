import pytest
from hypothesis import given, strategies as st

from mlisp.interpreter import Interpreter
from mlisp.reader.parser import read
from mlisp.evaluation.evaluator import evaluate
from mlisp.types import Number, EvalError, I64_MAX, I64_MIN


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+)", Number(0)),
        ("(+ 5)", Number(5)),
        ("(+ 1 1)", Number(2)),
        ("(+ 4 5 6)", Number(15)),
        ("(+ 5 -1)", Number(4)),
        ("(-)", EvalError("-: Wrong number of args (0)")),
        ("(- 1)", Number(-1)),
        ("(- 1 1)", Number(0)),
        ("(- 2 3)", Number(-1)),
        ("(- 9 5 2)", Number(2)),
        ("(- 4 -2)", Number(6)),
        ("(*)", Number(1)),
        ("(* 2)", Number(2)),
        ("(* 2 3)", Number(6)),
        ("(* 2 0)", Number(0)),
        ("(* 4 -1)", Number(-4)),
        ("(/)", EvalError("/: Wrong number of args (0)")),
        ("(/ 1)", Number(1)),
        ("(/ 2)", Number(0)),
        ("(/ 2 1)", Number(2)),
        ("(/ 100 2 2 5)", Number(5)),
        ("(/ -7 2)", Number(-3)),
        ("(/ 0)", EvalError("/: Divide by zero")),
        ("(/ 10 0)", EvalError("/: Divide by zero")),
        ("(/ 10 2 0)", EvalError("/: Divide by zero")),
        ("(%)", EvalError("%: Wrong number of args (0)")),
        ("(% 1)", EvalError("%: Wrong number of args (1)")),
        ("(% 1 2 3)", EvalError("%: Wrong number of args (3)")),
        ("(% 1 0)", EvalError("%: Divide by zero")),
        ("(% 10 7)", Number(3)),
        ("(% 10 -3)", Number(1)),
        ("(% -10 3)", Number(-1)),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", Number(57)),
        ('(+ 1 "2")', EvalError("+: invalid value")),
        ("(* 2 true)", EvalError("*: invalid value")),
        ("(- [1])", EvalError("-: invalid value")),
        ('(% "a" 2)', EvalError("%: invalid value")),
    ],
)
def test_arithmetic(env, source, expected):
    assert evaluate(read(source), env) == expected


def test_overflow_is_an_eval_error(env):
    assert evaluate(read(f"(+ {I64_MAX} 1)"), env) == EvalError("+: integer overflow")
    assert evaluate(read(f"(- {I64_MIN})"), env) == EvalError("-: integer overflow")
    assert evaluate(read(f"(/ {I64_MIN} -1)"), env) == EvalError("/: integer overflow")


def test_inc_and_dec_are_seeded(env):
    assert evaluate(read("(inc 5)"), env) == Number(6)
    assert evaluate(read("(dec 5)"), env) == Number(4)


small_ints = st.integers(min_value=-10**6, max_value=10**6)
nonzero = small_ints.filter(lambda n: n != 0)


@given(small_ints, small_ints)
def test_add_matches_python(a, b):
    assert Interpreter().eval(f"(+ {a} {b})") == Number(a + b)


@given(small_ints, nonzero)
def test_division_identity(a, b):
    # (/ a b) * b + (% a b) == a, with the remainder carrying a's sign
    session = Interpreter()
    q = session.eval(f"(/ {a} {b})").value
    r = session.eval(f"(% {a} {b})").value
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)
