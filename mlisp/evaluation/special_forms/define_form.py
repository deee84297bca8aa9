from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.errors import MLispArityError, MLispInvalidSymbol
from mlisp.types import Nil, Symbol
from mlisp.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    The value is evaluated first, against the current bindings, and the result
    always lands in the root so it outlives the call that made it.
    """
    if len(tail) != 2:
        raise MLispArityError("def: expected 2 args")

    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    if not isinstance(name, Symbol):
        raise MLispInvalidSymbol("def: first arg not of type symbol")
    env.insert_global(name, value)
    return Nil
