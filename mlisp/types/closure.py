"""User-defined function values."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO

from mlisp import SExpression

REST_MARKER = "&"


@dataclass(frozen=True, slots=True)
class Closure:
    """A first-class function: parameter names and a body form.

    Closures do not capture the environment they were built in. The body is
    evaluated against the caller's environment plus a fresh frame holding the
    parameters, so free variables resolve dynamically.

    `rest` names the parameter that collects surplus arguments (written
    ``[a b & more]``). `is_macro` marks closures made by ``defmacro``; they are
    still applied eagerly.
    """

    params: tuple[str, ...]
    body: SExpression
    is_macro: bool = False
    rest: str | None = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn [")
            names = list(self.params)
            if self.rest is not None:
                names += [REST_MARKER, self.rest]
            buffer.write(" ".join(names))
            buffer.write("] ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def accepts(self, count: int) -> bool:
        if self.rest is None:
            return count == len(self.params)
        return count >= len(self.params)
