from slisp.types.symbol import Symbol
from slisp.types.nil import Nil, NilType
from slisp.types.environment import Environment
from slisp.types.lambda_fn import Lambda

__all__ = ["Symbol", "Nil", "NilType", "Environment", "Lambda"]
