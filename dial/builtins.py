"""Built-in functions for the Dial runtime environment.

Arithmetic and comparison delegate to the numeric tower; the list primitives
operate on List values (and, for `count`/`empty?`, on vectors too).
Every builtin has the signature fn(env, args).
"""
from __future__ import annotations

from functools import partial

from dial import DialValue
from dial import numeric
from dial.errors import DialArityError, DialInvalidArgument
from dial.printer import type_name
from dial.types.builtin import Builtin
from dial.types.environment import Environment
from dial.types.equality import values_equal
from dial.types.symbol import Symbol
from dial.types.vector import is_list


# -------------------------------
# Equality
# -------------------------------
def equals(env: Environment, args: list[DialValue]) -> bool:
    """True if every argument is structurally equal to the first."""
    if not args:
        raise DialArityError("= requires at least 1 argument", expected="at least 1", got=0)
    first = args[0]
    return all(values_equal(first, other) for other in args[1:])


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[DialValue]) -> DialValue:
    return numeric.add(args)


def sub(env: Environment, args: list[DialValue]) -> DialValue:
    return numeric.sub(args)


def mul(env: Environment, args: list[DialValue]) -> DialValue:
    return numeric.mul(args)


def div(env: Environment, args: list[DialValue]) -> DialValue:
    return numeric.div(args)


# -------------------------------
# Comparison
# -------------------------------
def compare(op: str, env: Environment, args: list[DialValue]) -> bool:
    return numeric.compare(op, args)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[DialValue]) -> list[DialValue]:
    return list(args)


def is_list_builtin(env: Environment, args: list[DialValue]) -> bool:
    """True when the first argument is a list; false with no argument."""
    return bool(args) and is_list(args[0])


def _single_collection(name: str, args: list[DialValue]) -> list[DialValue]:
    if len(args) != 1:
        raise DialArityError(
            f"{name} requires exactly 1 argument, got {len(args)}", expected=1, got=len(args)
        )
    coll = args[0]
    if not isinstance(coll, list):
        raise DialInvalidArgument(f"{name} only valid on lists, got {type_name(coll)}")
    return coll


def is_empty(env: Environment, args: list[DialValue]) -> bool:
    return len(_single_collection("empty?", args)) == 0


def count(env: Environment, args: list[DialValue]) -> int:
    return len(_single_collection("count", args))


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": partial(compare, "<"),
    "<=": partial(compare, "<="),
    ">": partial(compare, ">"),
    ">=": partial(compare, ">="),
    "list": list_builtin,
    "list?": is_list_builtin,
    "empty?": is_empty,
    "count": count,
}


def register(env: Environment) -> None:
    """Bind every builtin in the global frame of `env`."""
    env.root().update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
