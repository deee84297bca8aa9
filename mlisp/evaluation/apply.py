"""Application engine for mlisp.

This module centralizes function application semantics for the interpreter:
- Natives receive the already-evaluated arguments and the calling environment.
- Closures get a fresh frame pushed onto the *caller's* environment, with the
  parameters bound by position. There is no captured definition environment,
  so free variables in the body resolve dynamically, and a closure finds
  itself by name through the shared root that `def`/`defn` write into.
- A List in callee position (e.g. a symbol bound to computed code) is
  evaluated once as a form and its result applied.

Errors raised here are MLispError subclasses; the evaluator turns them into
EvalError values at the form boundary.
"""

from __future__ import annotations

import logging

from mlisp import LispValue, EvaluatorFn
from mlisp.errors import MLispArityError, MLispTypeError
from mlisp.types import Closure, List, Native
from mlisp.types.environment import Environment

logger = logging.getLogger(__name__)


def bind_arguments(fn: Closure, args: list[LispValue], env: Environment) -> Environment:
    """Push a frame onto `env` and bind `fn`'s parameters to `args` in it."""
    if not fn.accepts(len(args)):
        raise MLispArityError(f"fn: Wrong number of args ({len(args)})")
    new_env = env.push()
    for name, value in zip(fn.params, args):
        new_env.insert_local(name, value)
    if fn.rest is not None:
        new_env.insert_local(fn.rest, List(args[len(fn.params):]))
    return new_env


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    new_env = bind_arguments(fn, args, env)
    logger.debug("apply %s at depth %d", fn, new_env.depth)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure, a Native, or a List that evaluates to one of them."""
    if isinstance(head, List):
        # One level only: a form that evaluates to yet another List is not callable.
        head = evaluate_fn(head, env)
        if isinstance(head, List):
            raise MLispTypeError("Failed to evaluate form")

    if isinstance(head, Native):
        return head(env, args)
    elif isinstance(head, Closure):
        return apply_closure(head, args, env, evaluate_fn)
    else:
        raise MLispTypeError("Failed to evaluate form")
