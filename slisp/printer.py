"""Display rendering of slisp values, as printed by the shell."""

from __future__ import annotations

import math
from decimal import Decimal

from slisp import LispValue
from slisp.types.lambda_fn import Lambda
from slisp.types.nil import NilType
from slisp.types.symbol import Symbol


def format_number(n: float) -> str:
    """Shortest round-tripping digits in plain positional notation.

    Integral values drop the fraction (`2`, `-0`); exponents are expanded
    (`1e-07` prints as `0.0000001`).
    """
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    text = format(Decimal(repr(n)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_display(value: LispValue) -> str:
    match value:
        case float() | int():
            return format_number(float(value))
        case Symbol():
            return value.name
        case NilType():
            return "nil"
        case Lambda():
            return str(value)
        case list():
            return "(" + " ".join(to_display(v) for v in value) + ")"
    return repr(value)
