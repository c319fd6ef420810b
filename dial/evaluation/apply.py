"""Application engine for Dial.

Centralizes function application for the evaluator:
- Builtins are invoked immediately with the evaluated arguments and the
  caller's environment; their return value is the result.
- Lambdas bind their arguments in a fresh frame on the captured environment
  and hand their body back to the trampoline as a TailCall, so a call in tail
  position never grows the Python stack.
"""

from __future__ import annotations

from dial import DialValue, SExpression
from dial.errors import DialTypeError
from dial.printer import pr_str
from dial.types.builtin import Builtin
from dial.types.environment import Environment
from dial.types.lambda_fn import Lambda
from dial.types.tail_call import TailCall


def apply_lambda(fn: Lambda, args: list[DialValue]) -> TailCall:
    """Bind `args` to the lambda's formals and return its body as a TailCall.

    Raises DialArityError when the argument count differs from the parameter count.
    """
    return TailCall(fn.body, fn.extend_env(args))


def apply(
    head: DialValue,
    args: list[DialValue],
    env: Environment,
    head_expr: SExpression = None,
) -> DialValue | TailCall:
    """Apply either a Lambda or a Builtin.

    `head_expr` is the unevaluated head, used to name the culprit when `head`
    is not callable.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args)
    if isinstance(head, Builtin):
        return head(env, args)
    culprit = head if head_expr is None else head_expr
    raise DialTypeError(f"{pr_str(culprit)} is not a function")
