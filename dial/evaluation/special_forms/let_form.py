from dial import EvaluatorFn
from dial import SExpression
from dial.errors import DialArityError, DialBindingError, DialInvalidArgument
from dial.printer import pr_str
from dial.types.environment import Environment
from dial.types.symbol import Symbol
from dial.types.tail_call import TailCall
from dial.types.vector import is_list


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """
    (let (name1 expr1 name2 expr2 ...) body)

    Bindings are evaluated in order inside the new frame, so later ones see
    earlier ones. The body runs in tail position in that frame.
    """
    if len(tail) != 2:
        raise DialArityError(
            "let requires a binding list and exactly one body expression",
            expected=2,
            got=len(tail),
        )

    bindings, body = tail
    if not is_list(bindings):
        raise DialInvalidArgument("let binding expects a list of associations")
    if len(bindings) % 2 != 0:
        raise DialInvalidArgument("let binding list must alternate names and expressions")

    scope = env.push_frame()
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise DialBindingError(f"expected symbol in let binding, found {pr_str(name)}")
        scope.define_local(name, evaluate_fn(val_expr, scope))
    return TailCall(body, scope)
