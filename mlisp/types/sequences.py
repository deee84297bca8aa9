"""List and Vector values.

Both own an immutable tuple of child values. A List in head position is a
call form; a Vector is only ever data, its elements evaluated one by one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from mlisp import LispValue


@dataclass(frozen=True, slots=True)
class _Seq:
    items: tuple[LispValue, ...] = ()

    def __init__(self, items: Iterable[LispValue] = ()):
        object.__setattr__(self, "items", tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def _join(self) -> str:
        return " ".join(str(item) for item in self.items)


@dataclass(frozen=True, slots=True, init=False)
class List(_Seq):
    def __str__(self) -> str:
        return f"({self._join()})"


@dataclass(frozen=True, slots=True, init=False)
class Vector(_Seq):
    def __str__(self) -> str:
        return f"[{self._join()}]"
