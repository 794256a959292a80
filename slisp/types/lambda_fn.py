"""User-defined function values for slisp."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from slisp import SExpression
from slisp.types.symbol import Symbol

if TYPE_CHECKING:
    from slisp.types.environment import Environment


class Lambda:
    """A function value: parameter names plus an unevaluated body.

    `env` is the environment the `fn` form was evaluated in. It is only
    consulted under lexical scoping and does not take part in equality.
    """

    __slots__ = ("params", "body", "env")

    def __init__(
        self,
        params: list[Symbol],
        body: list[SExpression],
        env: Environment | None = None,
    ):
        self.params: list[Symbol] = list(params)
        self.body: list[SExpression] = list(body)
        self.env: Environment | None = env

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and self.body == other.body
        )

    __hash__ = None  # mutable

    def __str__(self) -> str:
        # Imported lazily: the printer depends on this module
        from slisp.printer import to_display

        with StringIO() as buffer:
            buffer.write("fn(")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(to_display(self.body))
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Lambda({self.params!r}, {self.body!r})"
