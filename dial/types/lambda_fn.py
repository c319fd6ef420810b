"""Lambda function representation and argument binding for Dial."""

from __future__ import annotations

from io import StringIO

from dial import SExpression, DialValue
from dial.errors import DialArityError
from dial.types.environment import Environment
from dial.types.symbol import Symbol


class Lambda:
    """A first-class function with formal parameters, one body, and closure env.

    Lambdas are compared by identity only.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = list(formals)
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from dial.printer import pr_str

        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(pr_str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)

    @property
    def arity(self) -> int:
        return len(self.formals)

    def extend_env(self, args: list[DialValue]) -> Environment:
        """
        Push one frame on the captured environment and bind the given argument
        values to the formal parameters, positionally.

        The argument count must match the parameter count exactly.
        """
        if len(args) != self.arity:
            raise DialArityError(
                f"wrong number of args ({len(args)}): function expects {self.arity}",
                expected=self.arity,
                got=len(args),
            )
        frame = self.env.push_frame()
        for name, value in zip(self.formals, args):
            frame.define_local(name, value)
        return frame
