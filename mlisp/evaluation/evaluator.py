"""Core evaluator for the mlisp interpreter.

Dispatch order for a non-empty List form:
1. a Symbol head naming a special form gets the unevaluated tail;
2. a Symbol head is otherwise resolved (unbound -> EvalError, no arguments
   are evaluated); a List head is evaluated; any other head is used as-is;
3. the arguments are evaluated left to right, each exactly once;
4. the callee is applied (see mlisp.evaluation.apply).

Errors are values. An MLispError raised by a special form, a native or the
application engine is converted to an EvalError at the form that raised it,
and that value flows on like any other: an argument that evaluated to an
EvalError is handed to the callee, which usually rejects it with its own
message.
"""

from __future__ import annotations

import logging

from mlisp import SExpression, LispValue
from mlisp.errors import MLispError
from mlisp.types import EvalError, List, ParseError, Symbol, Vector
from mlisp.types.environment import Environment
from mlisp.evaluation.apply import apply
from mlisp.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one value tree against `env` and return the resulting value."""
    match expr:
        case List(items=()):
            # An empty call is legal and self-quoting
            return expr
        case List():
            return evaluate_form(expr, env)
        case Vector():
            return Vector(evaluate(item, env) for item in expr)
        case Symbol():
            if env.contains(expr):
                return env.lookup(expr)
            return EvalError("Symbol Not defined")
        case ParseError():
            return expr

    # --- Atoms return as-is ---
    return expr


def evaluate_form(form: List, env: Environment) -> LispValue:
    """Evaluate a non-empty List as a call form."""
    head, *tail_args = form.items
    try:
        if isinstance(head, Symbol):
            handler = SPECIAL_FORMS.get(head.name)
            if handler is not None:
                logger.debug("special form %s", head)
                return handler(tail_args, env, evaluate)
            if not env.contains(head):
                return EvalError("Symbol Not defined")
            head = env.lookup(head)
        elif isinstance(head, List):
            head = evaluate(head, env)

        args = [evaluate(arg, env) for arg in tail_args]
        return apply(head, args, env, evaluate)
    except MLispError as e:
        return EvalError(str(e))
