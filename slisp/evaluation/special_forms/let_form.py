from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispArityError, SlispInvalidSymbol
from slisp.types.environment import Environment
from slisp.types.nil import Nil
from slisp.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let name value)
    Binds in the current frame only and always returns nil.
    """
    if len(tail) != 2:
        raise SlispArityError("let requires exactly 2 arguments: (let name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SlispInvalidSymbol(f"let first argument must be a Symbol, got {name}")
    value = evaluate_fn(val_expr, env)
    env.set(name, value)
    return Nil
