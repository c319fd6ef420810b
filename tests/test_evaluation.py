from fractions import Fraction

import pytest

from dial.errors import DialTypeError, DialUndefinedSymbol
from dial.evaluation.evaluator import evaluate, evaluate0
from dial.types.builtin import Builtin
from dial.types.nil import Nil
from dial.types.symbol import Keyword, Symbol
from dial.types.tail_call import TailCall
from dial.types.vector import Vector


@pytest.mark.parametrize(
    "value",
    [Nil, True, False, 1, 3.14, Fraction(1, 3), "hello", Keyword("k"), [], Vector([])],
)
def test_self_evaluating(env, value):
    assert evaluate(value, env) is value


def test_builtins_self_evaluate(env):
    plus = env.lookup(Symbol("+"))
    assert isinstance(plus, Builtin)
    assert evaluate(plus, env) is plus


def test_symbol_lookup(env):
    env.define_local(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42
    with pytest.raises(DialUndefinedSymbol):
        evaluate(Symbol("z"), env)


def test_vector_elements_are_evaluated(env):
    env.define_local(Symbol("x"), 2)
    result = evaluate(Vector([1, Symbol("x"), [Symbol("+"), 1, 2]]), env)
    assert result == Vector([1, 2, 3])
    assert isinstance(result, Vector)


def test_vector_evaluates_nested_calls(run):
    assert run("[(list 1 2) :a]") == Vector([[1, 2], Keyword("a")])


def test_simple_application(env):
    assert evaluate([Symbol("+"), 1, 2], env) == 3


def test_builtin_value_in_head_position(env):
    plus = env.lookup(Symbol("+"))
    assert evaluate([plus, 1, 2, 3], env) == 6


def test_lambda_value_in_head_position(run):
    assert run("((fn (a b) (+ a b)) 2 3)") == 5


def test_not_a_function(run):
    with pytest.raises(DialTypeError, match="1 is not a function"):
        run("(1 2 3)")
    with pytest.raises(DialTypeError, match='"f" is not a function'):
        run('("f")')
    with pytest.raises(DialTypeError, match=r"\[1\] is not a function"):
        run("([1] 2)")


def test_head_is_evaluated_before_arguments(env):
    seen = []

    def record(tag):
        def fn(_env, args):
            seen.append(tag)
            return Builtin(tag, lambda _e, a: tag)
        return Builtin(tag, fn)

    env.define_local(Symbol("h"), record("head"))
    env.define_local(Symbol("a"), record("arg1"))
    env.define_local(Symbol("b"), record("arg2"))
    evaluate([[Symbol("h")], [Symbol("a")], [Symbol("b")]], env)
    assert seen == ["head", "arg1", "arg2"]


def test_argument_error_short_circuits(env):
    calls = []
    env.define_local(Symbol("note"), Builtin("note", lambda _e, a: calls.append(a) or Nil))
    with pytest.raises(DialUndefinedSymbol):
        evaluate([Symbol("list"), [Symbol("note"), 1], Symbol("missing"), [Symbol("note"), 2]], env)
    assert calls == [[1]]


def test_builtins_receive_caller_env(env):
    captured = []
    env.define_local(Symbol("grab"), Builtin("grab", lambda e, a: captured.append(e) or Nil))
    evaluate([Symbol("grab")], env)
    assert captured == [env]


def test_evaluate0_returns_tail_calls_for_tail_positions(env):
    step = evaluate0([Symbol("if"), True, 1, 2], env)
    assert isinstance(step, TailCall)
    assert step.expr == 1
    assert step.env is env
