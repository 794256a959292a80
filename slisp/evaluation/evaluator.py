"""Core evaluator for the slisp interpreter.

A direct recursive tree walker: nested expressions and function calls recurse
on the host stack. Lists headed by a symbol dispatch to a special form or to
function application; any other list evaluates its elements in order and
drops the ones that produce nil.
"""

from __future__ import annotations

import logging

from slisp import SExpression, LispValue
from slisp.types.environment import Environment
from slisp.types.nil import Nil
from slisp.types.symbol import Symbol
from slisp.evaluation.apply import apply
from slisp.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)

        case float():
            return expr

        case [Symbol() as head, *tail_args]:
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                return form(tail_args, env, evaluate)
            return apply(head, tail_args, env, evaluate)

        case list():
            results = []
            for item in expr:
                value = evaluate(item, env)
                if value is not Nil:
                    results.append(value)
            return results

    # Nil, Lambda and anything foreign evaluate to nil
    return Nil
