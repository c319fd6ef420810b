"""Exception hierarchy for Dial.

Every failure raised by the reader, the evaluator or a builtin derives from
DialError, so a shell can report it and keep the session going.
"""

from __future__ import annotations


class DialError(Exception):
    """ Base class for all Dial errors"""
    pass


class DialParseError(DialError):
    """ Raised when source text cannot be read"""

    def __init__(
        self,
        message: str,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        if position is not None:
            message = f"{message} at line {line}, column {column} (offset {position})"
        super().__init__(message)
        self.position = position
        self.line = line
        self.column = column


class DialUndefinedSymbol(DialError):
    """ Raised when a symbol is not bound in any active frame"""

    def __init__(self, name):
        super().__init__(f"no such symbol {name}")
        self.name = name


class DialTypeError(DialError):
    """ Raised when a value has the wrong runtime kind"""


class DialArityError(DialError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

    def __init__(self, message: str, expected: int | str | None = None, got: int | None = None):
        super().__init__(message)
        self.expected = expected
        self.got = got


class DialInvalidArgument(DialError):
    """ Raised when an argument is well-typed but semantically invalid"""


class DialBindingError(DialInvalidArgument, DialTypeError):
    """ Raised when a parameter or let binding name is not a symbol"""


class DialRecursionError(DialError):
    """ Raised when non-tail evaluation nests deeper than the host stack allows"""
