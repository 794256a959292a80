# Core type aliases for slisp's data model.
# Plain Python types represent both code (forms) and runtime values:
# float for numbers, list for lists, plus the Symbol, Nil and Lambda types
# from slisp.types.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (syntax and data share one representation)
SExpression = LispValue

# Evaluator function type passed to special forms
EvaluatorFn = Callable[..., LispValue]
