"""Literal data values: numbers, strings, characters and booleans.

Each is a frozen dataclass, so equality is structural and never crosses
variants: ``Number(1) != Bool(True)`` and ``Str("a") != Char("a")``.
"""

from __future__ import annotations

from dataclasses import dataclass

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


@dataclass(frozen=True, slots=True)
class Number:
    """A signed integer restricted to the 64-bit range."""

    value: int

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def in_range(value: int) -> bool:
        return I64_MIN <= value <= I64_MAX


@dataclass(frozen=True, slots=True)
class Str:
    text: str

    def __str__(self) -> str:
        return f'"{self.text}"'


@dataclass(frozen=True, slots=True)
class Char:
    char: str

    def __str__(self) -> str:
        return self.char


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


TRUE = Bool(True)
FALSE = Bool(False)
