from dial import EvaluatorFn
from dial import SExpression
from dial.errors import DialArityError
from dial.types.environment import Environment
from dial.types.nil import Nil
from dial.types.tail_call import TailCall


def is_truthy(value) -> bool:
    # Only nil and false are falsy; 0 and empty collections are true
    return value is not Nil and value is not False


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    if len(tail) != 3:
        raise DialArityError(
            f"if requires a condition, a then-expression and an else-expression, got {len(tail)} operands",
            expected=3,
            got=len(tail),
        )

    cond, then_expr, else_expr = tail
    if is_truthy(evaluate_fn(cond, env)):
        return TailCall(then_expr, env)
    return TailCall(else_expr, env)
