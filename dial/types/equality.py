"""Structural equality over Dial values."""

from __future__ import annotations

from dial import DialValue
from dial.types.lambda_fn import Lambda


def values_equal(a: DialValue, b: DialValue) -> bool:
    """Deep, tag-aware equality.

    Atoms are equal only within the same tag, so 1 and 1.0 differ and true is
    not 1. Lists and vectors compare element-wise and never equal each other.
    Lambdas are equal only to themselves.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, Lambda):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    return a == b
