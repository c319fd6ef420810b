# Core type aliases for Dial's data model.
# Values are plain Python objects where Python has a faithful type (bool, int,
# float, str, list, fractions.Fraction) plus small classes under dial.types for
# the rest (Nil, Symbol, Keyword, Vector, Builtin, Lambda).
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - DialValue:   use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; the reader emits the same objects the
# evaluator returns.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
DialValue = Any
# Forms alias (used interchangeably with DialValue)
SExpression = DialValue

# Evaluator function type: passed into special forms for sub-evaluation
EvaluatorFn = Callable[..., DialValue]
