"""
  Lisp Reader

- Character-level recursive descent with one character of lookahead
- Reads from a string or any text stream, one expression at a time
- Emits runtime values directly (code is data):

    - integers -> int (wrapped to the configured width)
    - symbols -> interned Symbol
    - "quoted text" -> Symbol named by the raw text between the quotes
    - lists -> Pair chains ending in Nil, `()` -> Nil
    - dotted lists `(a . b)` -> Pair chains ending in the dotted tail
    - 'x -> (quote x)
    - ; comments run to the end of the line
"""

from __future__ import annotations

import string
from typing import Iterator, Optional, TextIO, Union

from minilisp import SExpression
from minilisp.config import get_symbol_max_length
from minilisp.errors import LispRecursionError, LispSyntaxError
from minilisp.reader.char_stream import EOF, CharStream
from minilisp.types.integer import fixnum
from minilisp.types.nil import Nil
from minilisp.types.pair import from_iterable
from minilisp.types.symbol import Symbol

SYMBOL_SPECIAL_CHARS = "+-_<>=?*"
DIGITS = frozenset(string.digits)
SYMBOL_START = frozenset(string.ascii_letters + SYMBOL_SPECIAL_CHARS)
SYMBOL_CHARS = SYMBOL_START | DIGITS
# Characters that may follow a dot used as the dotted-tail marker
_DOT_FOLLOW = frozenset(string.whitespace) | {"(", ")", "'", '"', ";", EOF}

QUOTE = Symbol("quote")


class Reader:
    """Reads S-expressions from a character source."""

    def __init__(
        self,
        source: Union[str, TextIO, CharStream],
        symbol_max_length: Optional[int] = None,
    ):
        self.stream = source if isinstance(source, CharStream) else CharStream(source)
        self.symbol_max_length = (
            symbol_max_length if symbol_max_length is not None else get_symbol_max_length()
        )

    def _error(self, msg: str) -> LispSyntaxError:
        return LispSyntaxError(f"{msg} ({self.stream.position()})")

    def _nesting_error(self) -> LispRecursionError:
        return LispRecursionError(f"Expression nested too deeply ({self.stream.position()})")

    def skip_whitespace_and_comments(self) -> None:
        stream = self.stream
        while True:
            c = stream.peek()
            if c == EOF:
                return
            if c.isspace():
                stream.advance()
            elif c == ";":
                while stream.peek() not in ("\n", EOF):
                    stream.advance()
            else:
                return

    def read(self) -> Optional[SExpression]:
        """Read the next expression, or return None at end of input."""
        self.skip_whitespace_and_comments()
        if self.stream.at_eof():
            return None
        try:
            return self._read_datum()
        except RecursionError:
            raise self._nesting_error() from None

    def read_all(self) -> Iterator[SExpression]:
        while (expr := self.read()) is not None:
            yield expr

    def _read_nested(self, context: str) -> SExpression:
        self.skip_whitespace_and_comments()
        if self.stream.at_eof():
            raise self._error(f"Unexpected end of input {context}")
        return self._read_datum()

    def _read_datum(self) -> SExpression:
        stream = self.stream
        c = stream.peek()

        if c in DIGITS:
            return self.read_number(negative=False)

        if c == "-":
            stream.advance()
            if stream.peek() in DIGITS:
                return self.read_number(negative=True)
            return self.read_symbol(prefix="-")

        if c in SYMBOL_START:
            return self.read_symbol()

        if c == '"':
            stream.advance()
            return self.read_quoted_symbol()

        if c == "(":
            stream.advance()
            return self.read_list()

        if c == "'":
            stream.advance()
            expr = self._read_nested("after quote")
            return from_iterable([QUOTE, expr])

        if c == ")":
            raise self._error("Unexpected ')'")

        raise self._error(f"Syntax error: unexpected character {c!r}")

    def read_number(self, negative: bool) -> int:
        stream = self.stream
        value = 0
        while stream.peek() in DIGITS:
            value = value * 10 + (ord(stream.advance()) - ord("0"))
        return fixnum(-value if negative else value)

    def _check_length(self, buf: list[str]) -> None:
        if len(buf) >= self.symbol_max_length:
            raise self._error("Symbol name is too long")

    def read_symbol(self, prefix: str = "") -> Symbol:
        stream = self.stream
        buf = list(prefix)
        while stream.peek() in SYMBOL_CHARS:
            self._check_length(buf)
            buf.append(stream.advance())
        return Symbol("".join(buf))

    def read_quoted_symbol(self) -> Symbol:
        # Raw text, no escape processing
        stream = self.stream
        buf: list[str] = []
        while True:
            c = stream.advance()
            if c == EOF:
                raise self._error("Unterminated quoted symbol")
            if c == '"':
                return Symbol("".join(buf))
            self._check_length(buf)
            buf.append(c)

    def read_list(self) -> SExpression:
        stream = self.stream
        items: list[SExpression] = []
        tail: SExpression = Nil
        while True:
            self.skip_whitespace_and_comments()
            c = stream.peek()
            if c == EOF:
                raise self._error("Unmatched '('")
            if c == ")":
                stream.advance()
                break
            if c == ".":
                stream.advance()
                if not items or stream.peek() not in _DOT_FOLLOW:
                    raise self._error("Syntax error: misplaced '.'")
                tail = self._read_nested("after '.'")
                self.skip_whitespace_and_comments()
                if stream.peek() != ")":
                    raise self._error("Expected ')' after dotted tail")
                stream.advance()
                break
            items.append(self._read_datum())
        return from_iterable(items, tail)


def read_from_string(code: str) -> Optional[SExpression]:
    """Read the first expression in `code`."""
    return Reader(code).read()
