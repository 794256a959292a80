from slisp import EvaluatorFn
from slisp import SExpression, LispValue
from slisp.errors import SlispArityError, SlispSyntaxError
from slisp.types.environment import Environment


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (cond (test result)... default)

    Clauses are tried in order and the first test evaluating to a nonzero
    number selects its result; later clauses are not evaluated. A test that
    yields anything other than a number does not match. The last element is
    not a clause but the fallback expression, evaluated when nothing matched.
    """
    if not tail:
        raise SlispArityError("cond requires at least a default expression")

    *clauses, default = tail
    for clause in clauses:
        if not isinstance(clause, list) or len(clause) != 2:
            raise SlispSyntaxError(f"cond clause must be a (test result) pair, got {clause}")
        test, result = clause
        val = evaluate_fn(test, env)
        if isinstance(val, float) and val != 0.0:
            return evaluate_fn(result, env)
    return evaluate_fn(default, env)
