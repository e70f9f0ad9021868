"""
  Yu Reader: Lexer and Parser

- Streaming, lazy parsing
- Emits Yu values directly:

    - numbers -> float (any token Python's float() accepts)
    - symbols -> Symbol
    - lists -> Cons chains
    - () -> Nil
- `;` starts a comment that runs to the end of the line.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from yu import Expr
from yu.types.cons import List
from yu.types.errors import YuSyntaxError
from yu.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s();]+)"  # numbers and symbols
    r")",
    re.DOTALL,
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            break
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("lparen", "rparen", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def parse_atom(token: str) -> Expr:
    try:
        return float(token)
    except ValueError:
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

    def parse_expr(self) -> Expr:
        """Parse the next expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return parse_atom(tok_val)

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type == "rparen":
                    self.advance()
                    break
                if next_type is None:
                    raise YuSyntaxError("Unmatched '('")
                items.append(self.parse_expr())
            return List.from_iterable(items)

        if tok_type == "rparen":
            raise YuSyntaxError("Unexpected ')'")

        raise YuSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Expr]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> Expr:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    if stream.peek()[0] is None:
        raise YuSyntaxError("Unexpected end of input")
    expr = stream.parse_expr()
    if stream.peek()[0] is not None:
        raise YuSyntaxError(f"Unexpected trailing input: {stream.peek()[1]!r}")
    return expr


def read_all(source: str) -> list[Expr]:
    """Read every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
