"""Rendering of Dial values as source-like text."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

from dial import DialValue
from dial.types.builtin import Builtin
from dial.types.lambda_fn import Lambda
from dial.types.nil import NilType
from dial.types.symbol import Keyword, Symbol
from dial.types.vector import Vector


def format_float(value: float) -> str:
    """Positional digits that the reader accepts back; `inf`, `-inf` and `nan` are not readable."""
    if not math.isfinite(value):
        return repr(value)
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text


def pr_str(value: DialValue, readably: bool = True) -> str:
    """Render `value`; with readably=False strings are written without quotes."""
    match value:
        case NilType():
            return "nil"
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float():
            return format_float(value)
        case Fraction():
            return f"{value.numerator}/{value.denominator}"
        case str():
            return f'"{value}"' if readably else value
        case Symbol() | Keyword():
            return str(value)
        case Vector():
            return "[" + " ".join(pr_str(v, readably) for v in value) + "]"
        case list():
            return "(" + " ".join(pr_str(v, readably) for v in value) + ")"
        case Builtin():
            return f"#builtin: {value.name}"
        case Lambda():
            return str(value)
    return repr(value)


def type_name(value: DialValue) -> str:
    """Display name of a value's tag, used in error messages."""
    match value:
        case NilType():
            return "nil"
        case bool():
            return "bool"
        case int():
            return "int"
        case float():
            return "float"
        case Fraction():
            return "ratio"
        case str():
            return "string"
        case Symbol():
            return "symbol"
        case Keyword():
            return "keyword"
        case Vector():
            return "vector"
        case list():
            return "list"
        case Builtin():
            return "builtin"
        case Lambda():
            return "fn"
    return type(value).__name__
