from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.errors import MLispArityError, MLispInvalidSymbol, MLispTypeError
from mlisp.types import Closure, Nil, Symbol, Vector
from mlisp.types.closure import REST_MARKER
from mlisp.types.environment import Environment


def parse_params(form: str, params: SExpression) -> tuple[tuple[str, ...], str | None]:
    """Split a parameter vector into positional names and an optional rest name.

    ``[a b & more]`` gives ``(("a", "b"), "more")``.
    """
    if not isinstance(params, Vector):
        raise MLispTypeError(f"{form}: args must be a vector")
    names: list[str] = []
    for p in params:
        if not isinstance(p, Symbol):
            raise MLispTypeError(f"{form}: args must be symbols")
        names.append(p.name)

    if REST_MARKER not in names:
        return tuple(names), None
    idx = names.index(REST_MARKER)
    if len(names) != idx + 2 or names[idx + 1] == REST_MARKER:
        raise MLispArityError(f"{form}: {REST_MARKER} must be followed by exactly one name")
    return tuple(names[:idx]), names[idx + 1]


def build_closure(form: str, params: SExpression, body: SExpression, is_macro: bool = False) -> Closure:
    positional, rest = parse_params(form, params)
    return Closure(positional, body, is_macro=is_macro, rest=rest)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(fn [params...] body) builds a closure without binding it."""
    if len(tail) != 2:
        raise MLispArityError("fn: expected 2 args")
    params, body = tail
    return build_closure("fn", params, body)


def defn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(defn name [params...] body) is sugar for (def name (fn [params...] body))."""
    if len(tail) != 3:
        raise MLispArityError("defn: expected 3 args")
    name, params, body = tail
    if not isinstance(name, Symbol):
        raise MLispInvalidSymbol("defn: name must be a symbol")
    env.insert_global(name, build_closure("defn", params, body))
    return Nil
