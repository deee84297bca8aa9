"""Built-in functions for the mlisp runtime environment.

This module defines the native primitives (arithmetic, comparison, equality,
concat, not) and the registration helper that seeds them, together with the
`inc`/`dec` closures, into the root of a new session environment.

Every native has the signature ``op(env, args)`` where `args` are already
evaluated. Preconditions are checked on entry and reported by raising an
MLispError subclass whose message becomes the EvalError text.
"""
from __future__ import annotations

from typing import Callable

from mlisp import LispValue
from mlisp.errors import MLispArithmeticError, MLispArityError, MLispTypeError
from mlisp.reader.parser import read
from mlisp.types import (
    Bool,
    Char,
    Closure,
    List,
    Native,
    Number,
    Str,
    Vector,
)
from mlisp.types.environment import Environment


# -------------------------------
# Helpers
# -------------------------------
def _ints(op: str, args: list[LispValue]) -> list[int]:
    """Unwrap every argument to a Python int, or fail with '<op>: invalid value'."""
    if not all(isinstance(a, Number) for a in args):
        raise MLispTypeError(f"{op}: invalid value")
    return [a.value for a in args]


def _number(op: str, value: int) -> Number:
    if not Number.in_range(value):
        raise MLispArithmeticError(f"{op}: integer overflow")
    return Number(value)


def _trunc_div(n: int, d: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def _trunc_mod(n: int, d: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return n - d * _trunc_div(n, d)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Sum of all arguments; (+) is 0."""
    return _number("+", sum(_ints("+", args)))


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract the rest from the first; a single argument is negated."""
    nums = _ints("-", args)
    if not nums:
        raise MLispArityError("-: Wrong number of args (0)")
    if len(nums) == 1:
        return _number("-", -nums[0])
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return _number("-", result)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Product of all arguments; (*) is 1."""
    result = 1
    for x in _ints("*", args):
        result *= x
    return _number("*", result)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left to right, truncating; a single argument gives 1/x."""
    nums = _ints("/", args)
    if not nums:
        raise MLispArityError("/: Wrong number of args (0)")
    if len(nums) == 1:
        nums = [1] + nums
    if any(d == 0 for d in nums[1:]):
        raise MLispArithmeticError("/: Divide by zero")
    result = nums[0]
    for d in nums[1:]:
        result = _trunc_div(result, d)
    return _number("/", result)


def mod(env: Environment, args: list[LispValue]) -> LispValue:
    """(% n d): exactly two arguments."""
    nums = _ints("%", args)
    if len(nums) != 2:
        raise MLispArityError(f"%: Wrong number of args ({len(nums)})")
    n, d = nums
    if d == 0:
        raise MLispArithmeticError("%: Divide by zero")
    return _number("%", _trunc_mod(n, d))


# -------------------------------
# Equality and comparison
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> Bool:
    """true if every argument is structurally equal to the first."""
    if not args:
        raise MLispArityError(f"=: wrong number of args ({len(args)}) passed")
    first = args[0]
    return Bool(all(other == first for other in args[1:]))


def _chain(op: str, test: Callable[[int, int], bool]):
    def compare(env: Environment, args: list[LispValue]) -> Bool:
        if not args:
            raise MLispArityError(f"{op}: wrong number of args (0) passed")
        nums = _ints(op, args)
        return Bool(all(test(a, b) for a, b in zip(nums, nums[1:])))

    compare.__name__ = f"compare_{op}"
    compare.__doc__ = f"Chainable numeric {op}: true if it holds for every adjacent pair."
    return compare


lt = _chain("<", lambda a, b: a < b)
lte = _chain("<=", lambda a, b: a <= b)
gt = _chain(">", lambda a, b: a > b)
gte = _chain(">=", lambda a, b: a >= b)


def logical_not(env: Environment, args: list[LispValue]) -> Bool:
    if len(args) != 1:
        raise MLispArityError(f"not: Wrong number of args ({len(args)})")
    (val,) = args
    if not isinstance(val, Bool):
        raise MLispTypeError("not: invalid value")
    return Bool(not val.value)


# -------------------------------
# Collections
# -------------------------------
def concat(env: Environment, args: list[LispValue]) -> List:
    """Flatten Lists, Vectors and Strs (as Chars) into one List."""
    result: list[LispValue] = []
    for item in args:
        match item:
            case List() | Vector():
                result.extend(item)
            case Str(text=text):
                result.extend(Char(c) for c in text)
            case _:
                raise MLispTypeError("concat: not a concatable collection type")
    return List(result)


NATIVES: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "concat": concat,
}

# Closures seeded alongside the natives, written in mlisp itself
PRELUDE_FUNCTIONS: dict[str, tuple[tuple[str, ...], str]] = {
    "inc": (("x",), "(+ x 1)"),
    "dec": (("x",), "(- x 1)"),
}


def register(env: Environment) -> None:
    """Register all builtin natives and prelude closures into the root of `env`."""
    env.update({name: Native(name, op) for name, op in NATIVES.items()})
    env.update(
        {
            name: Closure(params, read(body))
            for name, (params, body) in PRELUDE_FUNCTIONS.items()
        }
    )
