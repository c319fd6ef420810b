from dial import EvaluatorFn
from dial import SExpression, DialValue
from dial.errors import DialArityError, DialInvalidArgument
from dial.types.environment import Environment
from dial.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> DialValue:
    """
    (def name value)
    Binds in the global frame whatever the nesting depth and returns the value.
    """
    if len(tail) != 2:
        raise DialArityError(
            f"def requires exactly 2 arguments, got {len(tail)}", expected=2, got=len(tail)
        )

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise DialInvalidArgument("def requires binding to a symbol")
    value = evaluate_fn(val_expr, env)
    env.define_global(name, value)
    return value
