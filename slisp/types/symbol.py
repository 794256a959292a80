from __future__ import annotations
import sys


class Symbol:
    """An identifier. Evaluates by environment lookup; operators and keywords
    such as `+`, `gte` or `let` are symbols too."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Interned: environment keys hash and compare on the name
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
