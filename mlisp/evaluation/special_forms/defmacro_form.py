"""Special form: defmacro.

Macros are not implemented yet. The form accepts the same shape as defn and
binds a closure flagged as a macro, but calls to it still evaluate their
arguments eagerly.
"""

from __future__ import annotations

import logging

from mlisp import EvaluatorFn, SExpression, LispValue
from mlisp.errors import MLispArityError, MLispInvalidSymbol
from mlisp.types import Nil, Symbol
from mlisp.types.environment import Environment
from mlisp.evaluation.special_forms.lambda_form import build_closure

logger = logging.getLogger(__name__)


def defmacro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise MLispArityError("defmacro: expected 3 args")

    macro_name, params, body = tail
    if not isinstance(macro_name, Symbol):
        raise MLispInvalidSymbol("defmacro: name must be a symbol")

    logger.warning("defmacro not implemented yet, %s will behave like defn", macro_name)
    env.insert_global(macro_name, build_closure("defmacro", params, body, is_macro=True))
    return Nil
