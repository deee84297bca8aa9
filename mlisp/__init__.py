# Core type aliases for the mlisp data model.
# Code and data share one representation: every runtime value is an instance of
# one of the classes in mlisp.types (Symbol, Number, Str, Char, Bool, Nil,
# ParseError, EvalError, List, Vector, Closure, Native).
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote unevaluated forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; they document intent, not a runtime check.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue)
SExpression = LispValue

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
