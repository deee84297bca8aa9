"""Error values.

Errors in mlisp are ordinary data: the reader returns a ParseError and the
evaluator returns an EvalError instead of raising. Both print in place of a
result and the REPL carries on.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseError:
    message: str

    def __str__(self) -> str:
        return f"Parse Error: {self.message}"


@dataclass(frozen=True, slots=True)
class EvalError:
    message: str

    def __str__(self) -> str:
        return f"Eval Error: {self.message}"
