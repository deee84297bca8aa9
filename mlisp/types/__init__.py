"""Runtime value classes for mlisp.

Every value the reader produces or the evaluator returns is an instance of one
of the classes re-exported here. Data and code share this one representation.
"""

from mlisp.types.symbol import Symbol
from mlisp.types.nil import Nil, NilType
from mlisp.types.atoms import Number, Str, Char, Bool, TRUE, FALSE, I64_MIN, I64_MAX
from mlisp.types.error_values import ParseError, EvalError
from mlisp.types.sequences import List, Vector
from mlisp.types.closure import Closure
from mlisp.types.native import Native
from mlisp.types.environment import Environment

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Number",
    "Str",
    "Char",
    "Bool",
    "TRUE",
    "FALSE",
    "I64_MIN",
    "I64_MAX",
    "ParseError",
    "EvalError",
    "List",
    "Vector",
    "Closure",
    "Native",
    "Environment",
]
