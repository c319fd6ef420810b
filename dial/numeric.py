"""Numeric tower for Dial: integers, floats and exact ratios.

Every n-ary operation picks one mode for all of its operands:

- any float operand: the whole operation runs in floating point;
- otherwise any ratio operand, or a division: exact rationals, collapsed back
  to an integer when the denominator is 1;
- otherwise plain integers.

Division by an exact zero (or by a product of divisors that is zero) is an
error in every mode; no infinities are produced.
"""

from __future__ import annotations

import math
import operator
from fractions import Fraction
from functools import reduce
from typing import Callable

from dial import DialValue
from dial.errors import DialArityError, DialInvalidArgument, DialTypeError
from dial.printer import pr_str, type_name

Number = int | float | Fraction


def is_number(value: DialValue) -> bool:
    return isinstance(value, (int, float, Fraction)) and not isinstance(value, bool)


def reduce_ratio(numerator: int, denominator: int) -> tuple[int, int]:
    """Reduce n/d by their gcd and normalise the sign so the denominator is positive."""
    if denominator == 0:
        raise DialInvalidArgument("cannot divide by zero")
    g = math.gcd(numerator, denominator)
    numerator, denominator = numerator // g, denominator // g
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    return numerator, denominator


def make_ratio(numerator: int, denominator: int) -> int | Fraction:
    """Build a reduced ratio, or an int when the denominator reduces to 1."""
    n, d = reduce_ratio(numerator, denominator)
    if d == 1:
        return n
    return Fraction(n, d)


def collapse(value: Number) -> Number:
    """A whole Fraction becomes an int; everything else is returned unchanged."""
    if isinstance(value, Fraction) and value.denominator == 1:
        return value.numerator
    return value


def _check_numbers(name: str, args: list[DialValue]) -> None:
    for arg in args:
        if not is_number(arg):
            raise DialTypeError(
                f"{name} expects numbers, got {type_name(arg)}: {pr_str(arg)}"
            )


def _to_float(value: Number) -> float:
    try:
        return float(value)
    except OverflowError:
        raise DialInvalidArgument(f"number too large to convert to float: {value}")


def _promote(name: str, args: list[DialValue], exact: bool = False) -> list[Number]:
    """Widen `args` to the common representation of this operation."""
    _check_numbers(name, args)
    if any(isinstance(a, float) for a in args):
        return [_to_float(a) for a in args]
    if exact or any(isinstance(a, Fraction) for a in args):
        return [Fraction(a) for a in args]
    return list(args)


def _product(values: list[Number]) -> Number:
    return reduce(operator.mul, values, 1)


def add(args: list[DialValue]) -> Number:
    """Sum of all arguments; 0 for none."""
    values = _promote("+", args)
    return collapse(sum(values, 0))


def sub(args: list[DialValue]) -> Number:
    """Subtract the rest from the first argument; negate a single argument."""
    if not args:
        raise DialArityError("- requires at least 1 argument", expected="at least 1", got=0)
    values = _promote("-", args)
    if len(values) == 1:
        return collapse(-values[0])
    first, *rest = values
    return collapse(first - sum(rest, 0))


def mul(args: list[DialValue]) -> Number:
    """Product of all arguments; 1 for none."""
    values = _promote("*", args)
    return collapse(_product(values))


def div(args: list[DialValue]) -> Number:
    """Divide the first argument by the product of the rest; invert a single argument."""
    if not args:
        raise DialArityError("/ requires at least 1 argument", expected="at least 1", got=0)
    values = _promote("/", args, exact=True)
    if len(values) == 1:
        numerator, divisor = 1, values[0]
    else:
        numerator, divisor = values[0], _product(values[1:])
    if divisor == 0:
        raise DialInvalidArgument("cannot divide by zero")
    if isinstance(divisor, float):
        return numerator / divisor
    return make_ratio(
        numerator.numerator * divisor.denominator,
        numerator.denominator * divisor.numerator,
    )


_COMPARATORS: dict[str, Callable[[Number, Number], bool]] = {
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


def compare(op: str, args: list[DialValue]) -> bool:
    """Chained comparison: true when `op` holds for every adjacent pair."""
    if not args:
        raise DialArityError(f"{op} requires at least 1 argument", expected="at least 1", got=0)
    _check_numbers(op, args)
    cmp = _COMPARATORS[op]
    return all(cmp(a, b) for a, b in zip(args, args[1:]))
