"""
  Lisp Reader, Lexer and Parser

- Lexes the whole line first, so an unterminated string is reported before
  any bracket problem further along the line.
- Emits mlisp value objects directly (the tree is both data and code):

    - empty input -> Nil
    - ( ... ) -> List
    - [ ... ] -> Vector
    - "..." -> Str (no escape sequences)
    - true / false -> Bool
    - base-10 integers in the 64-bit range -> Number
    - anything else -> Symbol

- Commas are whitespace.
- One top-level element is returned as-is; several are wrapped in a List.
- Malformed input never raises out of `read`: it returns a ParseError value.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional, Iterable

from mlisp import SExpression
from mlisp.errors import MLispSyntaxError
from mlisp.types import (
    Symbol,
    Nil,
    Number,
    Str,
    Bool,
    List,
    Vector,
    ParseError,
)

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"[^"]*")'  # double-quoted strings, no escapes
    r'|(?P<open_quote>")'  # a quote with no partner
    r'|(?P<atom>[^\s,()\[\]"]+)'  # numbers, booleans, symbols
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"-?[0-9]+", re.ASCII)

CLOSERS: dict[str, tuple[str, type]] = {
    "lparen": ("rparen", List),
    "lbracket": ("rbracket", Vector),
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.lastgroup is None:
            # Only separators remain
            break
        if m.lastgroup == "open_quote":
            raise MLispSyntaxError("unbalanced string quotes")
        yield m.lastgroup, m.group(m.lastgroup)
        pos = m.end()


def infer_atom(token: str) -> SExpression:
    """Type a bare token: Bool, Number, or else Symbol."""
    if token == "true":
        return Bool(True)
    if token == "false":
        return Bool(False)
    if INTEGER_RE.fullmatch(token):
        value = int(token)
        if Number.in_range(value):
            return Number(value)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse one element; returns None at end of input.

        Open sequences are kept on an explicit stack of
        (closer, seq_type, items) entries.
        """
        stack: list[tuple[str, type, list[SExpression]]] = []
        while True:
            tok_type, tok_val = self.advance()
            if tok_type is None:
                if stack:
                    raise MLispSyntaxError("unbalanced parentheses")
                return None

            if tok_type in CLOSERS:
                closer, seq_type = CLOSERS[tok_type]
                stack.append((closer, seq_type, []))
                continue

            if tok_type in ("rparen", "rbracket"):
                if not stack:
                    raise MLispSyntaxError("unbalanced parentheses")
                closer, seq_type, items = stack.pop()
                if tok_type != closer:
                    raise MLispSyntaxError("unmatched parentheses")
                value = seq_type(items)
            elif tok_type == "string":
                value = Str(tok_val[1:-1])
            elif tok_type == "atom":
                value = infer_atom(tok_val)
            else:
                raise MLispSyntaxError(f"Unknown token: {tok_type} {tok_val}")

            if not stack:
                return value
            stack[-1][2].append(value)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> SExpression:
    """Read one line of source into a value tree, or a ParseError."""
    try:
        tokens = list(lex(source))
        elements = list(TokenStream(tokens).parse_all())
    except MLispSyntaxError as e:
        logger.debug("read failed for %r: %s", source, e)
        return ParseError(str(e))
    if not elements:
        return Nil
    if len(elements) == 1:
        return elements[0]
    return List(elements)
