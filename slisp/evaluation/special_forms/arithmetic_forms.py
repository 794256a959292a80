"""Binary operator special forms: + - * / gt gte lt lte eq.

Every operator folds left to right over its operands, seeded with the first
one, applying the same operation at each step. Comparisons produce 1.0 or 0.0
and that result feeds the next step, so (gt 5 3 1) compares 1.0 > 1.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from slisp import EvaluatorFn, SExpression, LispValue
from slisp.errors import SlispArityError, SlispTypeError
from slisp.types.environment import Environment

BinaryOp = Callable[[float, float], float]


def ieee_div(a: float, b: float) -> float:
    """Float division that follows IEEE 754 instead of raising on zero."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _compare(pred: Callable[[float, float], bool]) -> BinaryOp:
    return lambda a, b: 1.0 if pred(a, b) else 0.0


OPERATORS: dict[str, BinaryOp] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": ieee_div,
    "gt": _compare(operator.gt),
    "gte": _compare(operator.ge),
    "lt": _compare(operator.lt),
    "lte": _compare(operator.le),
    "eq": _compare(operator.eq),
}


def binary_op_form(name: str):
    op = OPERATORS[name]

    def form(
        tail: list[SExpression],
        env: Environment,
        evaluate_fn: EvaluatorFn,
    ) -> LispValue:
        if len(tail) < 2:
            raise SlispArityError(f"{name} requires at least 2 operands, got {len(tail)}")
        operands = [evaluate_fn(expr, env) for expr in tail]
        for val in operands:
            if not isinstance(val, float):
                raise SlispTypeError(f"Operands of {name} must be numbers, got {val}")
        result = operands[0]
        for val in operands[1:]:
            result = op(result, val)
        return result

    form.__name__ = f"binary_op_form[{name}]"
    return form
