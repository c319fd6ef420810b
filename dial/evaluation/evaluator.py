"""Core evaluator and trampoline for the Dial interpreter.

`evaluate0` performs a single step: it either produces a value or returns a
TailCall naming the expression (and environment) whose value becomes the
result. `evaluate` loops over those steps, so every tail position (the branches
of `if`, the last form of `do`, the body of `let`, and the body of a called
Lambda) runs without nesting Python calls. Non-tail sub-expressions (arguments,
conditions, bindings) recurse through `evaluate` directly.
"""

from __future__ import annotations

from dial import SExpression, DialValue
from dial.evaluation.apply import apply
from dial.evaluation.special_forms import SPECIAL_FORMS
from dial.types.environment import Environment
from dial.types.symbol import Symbol
from dial.types.tail_call import TailCall
from dial.types.vector import Vector


def evaluate(expr: SExpression, env: Environment) -> DialValue:
    """
    Trampoline evaluator: tail-call aware evaluation.
    """
    result = evaluate0(expr, env)
    while isinstance(result, TailCall):
        result = evaluate0(result.expr, result.env)
    return result


def evaluate0(expr: SExpression, env: Environment) -> DialValue | TailCall:
    """
    Single-step evaluation. Returns either a value or a TailCall.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Vector():
            if not expr:
                return expr
            return Vector([evaluate(item, env) for item in expr])

        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            # Head first, then arguments left to right; any error aborts.
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, head)

    # --- Atoms and the empty list return as-is ---
    return expr
