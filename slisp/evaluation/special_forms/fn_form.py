from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispArityError, SlispInvalidSymbol, SlispSyntaxError
from slisp.types.environment import Environment
from slisp.types.lambda_fn import Lambda
from slisp.types.symbol import Symbol


def fn_form(
    tail: list[SExpression],
    env: Environment,
    _: EvaluatorFn,
) -> LispValue:
    """
    (fn (params...) (body...))
    The body list is kept unevaluated. The defining environment is captured
    for lexical scoping; binding the function to a name is left to `let`.
    """
    if len(tail) != 2:
        raise SlispArityError("fn requires exactly 2 arguments: (fn (params...) body)")

    params, body = tail
    if not isinstance(params, list):
        raise SlispSyntaxError(f"fn parameters must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise SlispInvalidSymbol(f"fn parameter must be a Symbol, got {p}")
    if not isinstance(body, list):
        raise SlispSyntaxError(f"fn body must be a list, got {body}")

    return Lambda(params, body, env)
