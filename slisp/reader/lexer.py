"""
  Lexer for slisp source text.

Tokens are (token_type, token_value) tuples:

    - ("number", float)   optional '-', digits, optional '.digits'
    - ("symbol", str)     maximal run of non-whitespace, non-paren chars
    - ("lparen", "(")
    - ("rparen", ")")

Alternatives are tried in that order at every position, so "-5" is a number
while "-" and "-x" are symbols, and "1abc" lexes as 1 followed by abc.
Whitespace, newlines included, only separates tokens.
"""

from __future__ import annotations

import re
from typing import Iterator, Union

from slisp.errors import SlispTokenizeError

Token = tuple[str, Union[float, str]]

TOKEN_RE = re.compile(
    r"(?P<number>-?\d+(?:\.\d+)?)"  # numeric literal
    r"|(?P<symbol>[^\s()]+)"  # bare symbol, operators included
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
)

WHITESPACE_RE = re.compile(r"\s*")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise SlispTokenizeError(source[pos], pos)
        kind = m.lastgroup
        text = m.group(kind)
        yield kind, float(text) if kind == "number" else text
        pos = m.end()


def tokenize(source: str) -> list[Token]:
    return list(lex(source))
