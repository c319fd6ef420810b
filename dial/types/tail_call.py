from dial import SExpression
from dial.types.environment import Environment


class TailCall:
    """Pending evaluation of `expr` in `env`, returned from a tail position to the trampoline."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
