"""Built-in primitive values."""

from __future__ import annotations

from itertools import count
from typing import Callable

# Process-wide source of unique tags; a Native's identity is its tag.
_ids = count(1)


class Native:
    """An opaque callable wrapping a Python function ``op(env, args)``.

    Two Natives are equal only when they share an `id`, even if they wrap the
    same function.
    """

    __slots__ = ("id", "name", "op")

    def __init__(self, name: str, op: Callable):
        self.id: int = next(_ids)
        self.name = name
        self.op = op

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Native) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("native", self.id))

    def __call__(self, env, args):
        return self.op(env, args)

    def __repr__(self) -> str:
        return f"Native({self.name!r}, id={self.id})"

    def __str__(self) -> str:
        return f"#<native {self.name}>"
