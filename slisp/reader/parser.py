"""
  slisp parser

Builds values straight from the token stream:

    - numbers -> float
    - symbols -> Symbol
    - lists   -> Python list

A program with exactly one top-level expression parses to that expression;
anything else is wrapped in a list, so a multi-statement program has the
same shape as a literal list.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from slisp import SExpression
from slisp.errors import SlispParseError
from slisp.reader.lexer import Token, tokenize
from slisp.types.symbol import Symbol


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], object]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], object]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()

        if tok_type is None:
            raise SlispParseError("Unexpected end of input")

        if tok_type == "number":
            return tok_val

        if tok_type == "symbol":
            return Symbol(tok_val)

        if tok_type == "lparen":
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type is None:
                    raise SlispParseError("Unbalanced parentheses")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SlispParseError("Unexpected closing parenthesis")

        raise SlispParseError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse_all(source: str) -> Iterator[SExpression]:
    """Yield the top-level expressions of `source` one at a time."""
    return TokenStream(tokenize(source)).parse_all()


def parse(source: str) -> SExpression:
    expressions = list(parse_all(source))
    if len(expressions) == 1:
        return expressions[0]
    return expressions
