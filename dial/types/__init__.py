"""Runtime value types for Dial."""

from dial.types.nil import Nil, NilType
from dial.types.symbol import Symbol, Keyword
from dial.types.vector import Vector, is_list
from dial.types.builtin import Builtin
from dial.types.environment import Environment
from dial.types.lambda_fn import Lambda
from dial.types.tail_call import TailCall

__all__ = [
    "Nil",
    "NilType",
    "Symbol",
    "Keyword",
    "Vector",
    "is_list",
    "Builtin",
    "Environment",
    "Lambda",
    "TailCall",
]
