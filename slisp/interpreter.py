from __future__ import annotations

import logging

from slisp import LispValue
from slisp.config import check_scoping
from slisp.errors import SlispParseError, SlispRuntimeError
from slisp.reader.parser import parse
from slisp.runtime_context import get_scoping, scoping as scoping_mode
from slisp.types.environment import Environment
from slisp.evaluation.evaluator import evaluate as eval_expr

logger = logging.getLogger(__name__)


def evaluate(source: str, env: Environment) -> LispValue:
    """Parse `source` and evaluate it against `env`.

    This is the single entry point used by the shell. Bindings made by `let`
    land in `env`, so passing the same environment to successive calls keeps
    them alive. Tokenize, parse and runtime errors all propagate as
    SlispError subclasses; nothing is rolled back on failure.
    """
    try:
        program = parse(source)
    except RecursionError:
        raise SlispParseError("Expression nested too deeply") from None
    logger.debug("parsed %r", program)
    try:
        return eval_expr(program, env)
    except RecursionError:
        raise SlispRuntimeError("Maximum recursion depth exceeded") from None


class Interpreter:
    """
    Holds the root Environment for one session and evaluates source text
    against it, so definitions persist across calls.

    The scoping mode is fixed per interpreter: None takes the mode active
    when the interpreter is created (SLISP_SCOPING by default).
    """

    def __init__(self, scoping: str | None = None):
        self.scoping: str = check_scoping(scoping) if scoping is not None else get_scoping()
        self.env: Environment = Environment()

    def eval(self, code: str) -> LispValue:
        with scoping_mode(self.scoping):
            return evaluate(code, self.env)
