"""Runtime environment for mlisp.

An Environment is two collaborators in one handle:

- `globals`: the root mapping, created once per session with the primitives
  seeded into it. It is shared by reference between every Environment derived
  from it, so a `def` issued at any call depth is visible everywhere.
- `frames`: a tuple of local scope mappings, index 0 innermost. `push()`
  returns a new Environment with a fresh empty frame prepended; frames are
  dropped simply by discarding the Environment that holds them.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping

from mlisp import LispValue
from mlisp.errors import MLispInvalidSymbol
from mlisp.types.error_values import EvalError
from mlisp.types.symbol import Symbol


def _key(name: str | Symbol) -> str:
    if isinstance(name, Symbol):
        return name.name
    if isinstance(name, str):
        return name
    raise MLispInvalidSymbol(f"Cannot use {name} as a name")


class Environment:
    """Chain of local frames over a shared root mapping."""

    __slots__ = ("globals", "frames")

    def __init__(
        self,
        root: dict[str, LispValue] | None = None,
        frames: tuple[dict[str, LispValue], ...] = (),
    ):
        self.globals: dict[str, LispValue] = root if root is not None else {}
        self.frames: tuple[dict[str, LispValue], ...] = frames

    @property
    def depth(self) -> int:
        """Number of local frames above the root."""
        return len(self.frames)

    def push(self) -> Environment:
        """Return a new chain with an empty innermost frame and the same root."""
        return Environment(self.globals, ({},) + self.frames)

    def _scopes(self) -> Iterator[dict[str, LispValue]]:
        yield from self.frames
        yield self.globals

    def insert_local(self, name: str | Symbol, value: LispValue) -> None:
        """Bind `name` in the innermost frame (the root when there is none)."""
        key = _key(name)
        if self.frames:
            self.frames[0][key] = value
        else:
            self.globals[key] = value

    def insert_global(self, name: str | Symbol, value: LispValue) -> None:
        """Bind `name` in the shared root, whatever the current depth."""
        self.globals[_key(name)] = value

    def contains(self, name: str | Symbol) -> bool:
        key = _key(name)
        return any(key in scope for scope in self._scopes())

    def lookup(self, name: str | Symbol) -> LispValue:
        """Innermost-first lookup; EvalError("Not in scope") when unbound."""
        key = _key(name)
        for scope in self._scopes():
            if key in scope:
                return scope[key]
        return EvalError("Not in scope")

    def update(self, mapping: Mapping[str | Symbol, LispValue]) -> None:
        """Bulk-define a mapping of names to values in the root."""
        for k, v in mapping.items():
            self.globals[_key(k)] = v

    @staticmethod
    def _write_vars(buffer: StringIO, scope: dict[str, LispValue]) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in scope.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost frame only, with an indicator for the rest of the chain."""
        with StringIO() as buffer:
            if self.frames:
                self._write_vars(buffer, self.frames[0])
                buffer.write(" -> ...")
            else:
                self._write_vars(buffer, self.globals)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            parts = []
            for scope in self.frames:
                part = StringIO()
                self._write_vars(part, scope)
                parts.append(part.getvalue())
            parts.append(f"<root: {len(self.globals)} bindings>")
            buffer.write(" -> ".join(parts))
            buffer.write(">")
            return buffer.getvalue()
