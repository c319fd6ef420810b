"""
  Dial Reader, Lexer and Parser

- Emits the same Python values the evaluator works on (data is code):

    - nil -> Nil
    - true / false -> bool
    - integers -> int, floats (digits "." digits) -> float
    - strings -> str (no escapes)
    - :name -> Keyword
    - other tokens -> Symbol
    - ( ... ) -> list
    - [ ... ] -> Vector

- `;` starts a comment that runs to the end of the line.
- Errors carry the offending offset, line and column.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from dial import SExpression
from dial.errors import DialParseError
from dial.types.nil import Nil
from dial.types.symbol import Keyword, Symbol
from dial.types.vector import Vector

logger = logging.getLogger(__name__)

Token = tuple[str, str, int]  # (kind, text, offset)

TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"[^"]*")'  # double-quoted strings, no escapes
    r'|(?P<unterminated>"[^"]*\Z)'  # string running to end of input
    r'|(?P<atom>[^\s()\[\]";]+)'  # numbers, keywords, booleans, symbols
)

INT_RE = re.compile(r"-?[0-9]+")
FLOAT_RE = re.compile(r"-?[0-9]+\.[0-9]+")
NUMBER_START_RE = re.compile(r"-?[0-9]")

LITERALS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}

MAX_NESTING = 256

WORDS = ("atom", "string")
CLOSERS = {"lparen": "rparen", "lbracket": "rbracket"}
DELIMITER_TEXT = {"lparen": "(", "rparen": ")", "lbracket": "[", "rbracket": "]"}


def line_col(source: str, pos: int) -> tuple[int, int]:
    """1-based line and column of offset `pos` in `source`."""
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


def syntax_error(source: str, message: str, pos: int) -> DialParseError:
    line, column = line_col(source, pos)
    logger.debug("parse error: %s at offset %d", message, pos)
    return DialParseError(message, pos, line, column)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (kind, text, offset) tuples, skipping whitespace and comments.

    A string may not touch an atom or another string; `"a"b` is an error.
    """
    pos = 0
    n = len(source)
    prev_kind, prev_end = None, -1
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        if kind == "unterminated":
            raise syntax_error(source, "unterminated string", pos)
        if kind not in ("whitespace", "comment"):
            if prev_end == pos and kind in WORDS and prev_kind in WORDS:
                raise syntax_error(source, "missing whitespace before token", pos)
            yield kind, m.group(kind), pos
            prev_kind, prev_end = kind, m.end()
        pos = m.end()


def parse_atom(source: str, text: str, pos: int) -> SExpression:
    """Classify a bare token as a number, literal, keyword or symbol."""
    if INT_RE.fullmatch(text):
        return int(text)
    if FLOAT_RE.fullmatch(text):
        return float(text)
    if text in LITERALS:
        return LITERALS[text]
    if NUMBER_START_RE.match(text):
        raise syntax_error(source, f"malformed number {text!r}", pos)
    if text.startswith(":") and len(text) > 1 and not text[1].isdigit():
        return Keyword(text[1:])
    return Symbol(text)


class TokenStream:
    def __init__(self, source: str, token_iter: Optional[Iterator[Token]] = None):
        self.source = source
        self.tokens = iter(token_iter if token_iter is not None else lex(source))
        self.buffer: list[Token] = []
        self.depth = 0

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(self, message: str, pos: int) -> DialParseError:
        return syntax_error(self.source, message, pos)

    def parse_expr(self) -> SExpression:
        """Parse one expression; the caller must check that a token is available."""
        tok = self.advance()
        if tok is None:
            raise self.error("unexpected end of input", len(self.source))
        kind, text, pos = tok

        if kind == "atom":
            return parse_atom(self.source, text, pos)

        if kind == "string":
            return text[1:-1]

        if kind in CLOSERS:
            if self.depth >= MAX_NESTING:
                raise self.error("nesting too deep", pos)
            self.depth += 1
            try:
                items = self.parse_sequence(kind, pos)
            finally:
                self.depth -= 1
            return Vector(items) if kind == "lbracket" else items

        raise self.error(f"unexpected {DELIMITER_TEXT.get(kind, text)!r}", pos)

    def parse_sequence(self, opener: str, open_pos: int) -> list[SExpression]:
        """Parse elements up to the closer matching `opener` (already consumed)."""
        closer = CLOSERS[opener]
        items: list[SExpression] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise self.error(f"unclosed {DELIMITER_TEXT[opener]!r}", open_pos)
            kind, text, pos = tok
            if kind == closer:
                self.advance()
                return items
            if kind in ("rparen", "rbracket"):
                raise self.error(
                    f"mismatched {text!r}, expected {DELIMITER_TEXT[closer]!r}", pos
                )
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def read_str(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`.

    Blank or comment-only input reads as an empty list. Raises DialParseError,
    including for lists or vectors nested deeper than MAX_NESTING.
    """
    try:
        return list(TokenStream(source).parse_all())
    except RecursionError:
        raise syntax_error(source, "nesting too deep", 0) from None


read = read_str
