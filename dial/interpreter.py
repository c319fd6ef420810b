from __future__ import annotations

import logging

from dial import SExpression, DialValue
from dial.builtins import register
from dial.errors import DialRecursionError
from dial.evaluation.evaluator import evaluate
from dial.printer import pr_str
from dial.reader.parser import read
from dial.types.environment import Environment
from dial.types.nil import Nil

logger = logging.getLogger(__name__)


def make_global_env() -> Environment:
    """A fresh global frame populated with the builtins."""
    env = Environment()
    register(env)
    return env


class Interpreter:
    """
    Orchestrates reading and evaluating Dial code.
    Keeps one global Environment across calls, so `def` persists between them.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = make_global_env()
        if prelude:
            self.eval_prelude(prelude)

    def read(self, code: str) -> list[SExpression]:
        return read(code)

    def eval_expr(self, expr: SExpression) -> DialValue:
        """Evaluate one already-read expression in the global environment.

        Non-tail recursion that runs out of host stack raises DialRecursionError.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("eval %s", pr_str(expr))
        try:
            return evaluate(expr, self.env)
        except RecursionError:
            raise DialRecursionError("maximum evaluation depth exceeded") from None

    def eval_prelude(self, code: str) -> None:
        for expr in self.read(code):
            self.eval_expr(expr)

    def eval_all(self, code: str) -> list[DialValue]:
        """Evaluate every top-level expression in `code`, returning one result each.

        The first error propagates; definitions made by earlier expressions stay.
        """
        return [self.eval_expr(expr) for expr in self.read(code)]

    def eval(self, code: str) -> DialValue:
        results = self.eval_all(code)
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
