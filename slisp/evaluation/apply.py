"""Function application for slisp.

A call `(name arg...)` looks `name` up, requires a Lambda, and evaluates the
body in a fresh child frame holding one binding per parameter. Arguments are
evaluated in the caller's environment, by position, only for declared
parameters: surplus arguments are ignored unevaluated and a missing one is an
arity error.

Which frame becomes the parent of the call frame depends on the scoping mode
(see slisp.runtime_context):

- dynamic: the caller's environment at call time. A function sees whatever
  bindings are live at its call site, not those of its definition site.
- lexical: the environment captured when the `fn` form was evaluated.
"""

from __future__ import annotations

import logging

from slisp import LispValue, EvaluatorFn, SExpression
from slisp.errors import SlispArityError, SlispTypeError
from slisp.runtime_context import get_scoping
from slisp.types.environment import Environment
from slisp.types.lambda_fn import Lambda
from slisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def call_frame_parent(fn: Lambda, caller_env: Environment) -> Environment:
    if get_scoping() == "lexical" and fn.env is not None:
        return fn.env
    return caller_env


def bind_arguments(
    fn: Lambda,
    name: Symbol,
    arg_exprs: list[SExpression],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Environment:
    new_env = call_frame_parent(fn, caller_env).extend()
    for i, param in enumerate(fn.params):
        if i >= len(arg_exprs):
            raise SlispArityError(
                f"{name} expects {len(fn.params)} arguments, got {len(arg_exprs)}: "
                f"missing argument for {param}"
            )
        new_env.set(param, evaluate_fn(arg_exprs[i], caller_env))
    return new_env


def apply(
    name: Symbol,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    fn = env.lookup(name)
    if not isinstance(fn, Lambda):
        raise SlispTypeError(f"Not a lambda: {name}")

    new_env = bind_arguments(fn, name, arg_exprs, env, evaluate_fn)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("call %s with %s at frame depth %d", name, new_env, new_env.depth())
    return evaluate_fn(fn.body, new_env)
