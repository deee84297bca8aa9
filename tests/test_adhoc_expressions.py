import pytest

from mlisp.interpreter import Interpreter
from mlisp.types import Nil, Number, Bool, Char, List, Vector, EvalError

# One session, evaluated top to bottom: later lines depend on earlier definitions.
programs = [
    ("(def a 5)", Nil),
    ("a", Number(5)),
    ("(def a (+ a 1))", Nil),
    ("a", Number(6)),
    ("(defn add2 [x y] (+ x y))", Nil),
    ("(add2 a 10)", Number(16)),
    ("(def fac (fn [x] (if (= x 0) 1 (* x (fac (dec x))))))", Nil),
    ("(fac 5)", Number(120)),
    ("(fac 10)", Number(3628800)),
    ("(defn count-down [n] (if (= n 0) [] (concat [n] (count-down (dec n)))))", Nil),
    ("(count-down 3)", List([Number(3), Number(2), Number(1)])),
    ("(defn rest-of [x & more] more)", Nil),
    ("(rest-of 1 2 3)", List([Number(2), Number(3)])),
    ("(rest-of 1)", List([])),
    ("(def chars (concat \"hi\" [1]))", Nil),
    ("chars", List([Char("h"), Char("i"), Number(1)])),
    ("[a (inc a) (fac 3)]", Vector([Number(6), Number(7), Number(6)])),
    ("(if (< a 10) true false)", Bool(True)),
    ("(defn max2 [x y] (if (> x y) x y))", Nil),
    ("(max2 3 9)", Number(9)),
    ("(undefined-fn 1)", EvalError("Symbol Not defined")),
    ("(max2 1 undefined)", EvalError("if: first element must be boolean")),
    # the session survives errors
    ("(add2 1 1)", Number(2)),
]


@pytest.fixture(scope="module")
def session():
    return Interpreter()


@pytest.mark.parametrize("source,expected", programs)
def test_adhoc_programs_eval(session, source, expected):
    assert session.eval(source) == expected


def test_prelude_lines_are_evaluated_first():
    prelude = """
(defn sq [x] (* x x))

(def two 2)
"""
    session = Interpreter(prelude=prelude)
    assert session.eval("(sq two)") == Number(4)


def test_malformed_prelude_is_rejected():
    from mlisp.errors import MLispSyntaxError

    with pytest.raises(MLispSyntaxError):
        Interpreter(prelude="(defn broken [x]")


def test_prelude_eval_error_is_rejected():
    from mlisp.errors import MLispEvalError

    with pytest.raises(MLispEvalError, match="prelude line 2"):
        Interpreter(prelude="(def one 1)\n(undefined-thing 1)")
