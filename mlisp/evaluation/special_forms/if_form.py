from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.errors import MLispArityError, MLispTypeError
from mlisp.types import Bool, Nil
from mlisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise MLispArityError(f"if: wrong number of args ({len(tail)})")

    cond = evaluate_fn(tail[0], env)
    # Only a Bool may steer the branch; there is no truthiness
    if not isinstance(cond, Bool):
        raise MLispTypeError("if: first element must be boolean")

    if cond.value:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
