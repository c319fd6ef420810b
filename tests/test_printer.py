from fractions import Fraction

import pytest

from dial.printer import pr_str, type_name
from dial.types.builtin import Builtin
from dial.types.environment import Environment
from dial.types.lambda_fn import Lambda
from dial.types.nil import Nil
from dial.types.symbol import Keyword, Symbol
from dial.types.vector import Vector


@pytest.mark.parametrize(
    "value, expected",
    [
        (Nil, "nil"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-3.5, "-3.5"),
        (3.0, "3.0"),
        (1e16, "10000000000000000.0"),
        (1e-7, "0.0000001"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (float("nan"), "nan"),
        (Fraction(-1, 3), "-1/3"),
        ("hi", '"hi"'),
        (Symbol("sym"), "sym"),
        (Keyword("kw"), ":kw"),
        ([], "()"),
        ([1, [2, "x"]], '(1 (2 "x"))'),
        (Vector([1, Vector([])]), "[1 []]"),
        (Builtin("+", lambda e, a: 0), "#builtin: +"),
    ],
)
def test_pr_str(value, expected):
    assert pr_str(value) == expected


def test_pr_str_not_readably():
    assert pr_str("hi", readably=False) == "hi"
    assert pr_str(["a", Symbol("b")], readably=False) == "(a b)"


def test_lambda_prints_as_source():
    fn = Lambda([Symbol("x")], [Symbol("+"), Symbol("x"), 1], Environment())
    assert pr_str(fn) == "(fn (x) (+ x 1))"


@pytest.mark.parametrize(
    "value, expected",
    [
        (Nil, "nil"),
        (True, "bool"),
        (1, "int"),
        (1.0, "float"),
        (Fraction(1, 2), "ratio"),
        ("s", "string"),
        (Symbol("s"), "symbol"),
        (Keyword("s"), "keyword"),
        ([], "list"),
        (Vector(), "vector"),
        (Builtin("f", lambda e, a: 0), "builtin"),
        (Lambda([], 1, Environment()), "fn"),
    ],
)
def test_type_name(value, expected):
    assert type_name(value) == expected
