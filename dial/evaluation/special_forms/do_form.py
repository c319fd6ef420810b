from dial import EvaluatorFn
from dial import SExpression, DialValue
from dial.types.environment import Environment
from dial.types.nil import Nil
from dial.types.tail_call import TailCall


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> DialValue | TailCall:
    if not tail:
        return Nil
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return TailCall(tail[-1], env)
