from dial import EvaluatorFn
from dial import SExpression, DialValue
from dial.errors import DialArityError, DialBindingError, DialTypeError
from dial.printer import pr_str
from dial.types.environment import Environment
from dial.types.lambda_fn import Lambda
from dial.types.symbol import Symbol
from dial.types.vector import is_list


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    _: EvaluatorFn,
) -> DialValue:
    """(fn (params...) body) closes over the current chain."""
    if len(tail) != 2:
        raise DialArityError(
            "fn requires a parameter list and exactly one body expression",
            expected=2,
            got=len(tail),
        )

    params, body = tail
    if not is_list(params):
        raise DialTypeError(f"fn parameters must be a list, got {pr_str(params)}")
    for p in params:
        if not isinstance(p, Symbol):
            raise DialBindingError(f"fn parameter must be a symbol, got {pr_str(p)}")

    return Lambda(params, body, env)
