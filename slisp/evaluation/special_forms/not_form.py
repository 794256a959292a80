from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispArityError, SlispTypeError
from slisp.types.environment import Environment


def not_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (not x)
    1.0 when x evaluates to 0, 0.0 for any other number.
    """
    if len(tail) != 1:
        raise SlispArityError(f"not requires exactly 1 argument, got {len(tail)}")
    val = evaluate_fn(tail[0], env)
    if not isinstance(val, float):
        raise SlispTypeError(f"not requires a number, got {val}")
    return 1.0 if val == 0.0 else 0.0
