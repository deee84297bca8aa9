from __future__ import annotations

import logging

from mlisp import LispValue
from mlisp.errors import MLispEvalError, MLispSyntaxError
from mlisp.reader.parser import read
from mlisp.types import EvalError, ParseError
from mlisp.types.environment import Environment
from mlisp.builtin.env_builtin import register
from mlisp.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating mlisp code, one line at a time.
    Maintains a single Environment across calls, so definitions persist for
    the whole session.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate each non-blank line of `code`, failing loudly on errors."""
        for lineno, line in enumerate(code.splitlines(), start=1):
            if not line.strip():
                continue
            result = self.eval(line)
            if isinstance(result, ParseError):
                raise MLispSyntaxError(f"prelude line {lineno}: {result}")
            if isinstance(result, EvalError):
                raise MLispEvalError(f"prelude line {lineno}: {result}")

    def eval(self, code: str) -> LispValue:
        """Read one line of code and evaluate it against the session environment."""
        expr = read(code)
        if isinstance(expr, ParseError):
            logger.debug("not evaluating %r: %s", code, expr)
            return expr
        return evaluate(expr, self.env)
