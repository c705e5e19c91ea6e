from __future__ import annotations

from typing import TextIO, Union

# End of input is signalled by the empty string.
EOF = ""


class CharStream:
    """Character source with one character of lookahead.

    Wraps either a string or a text stream (anything with `read(1)`), so the
    reader can consume an interactive stdin without buffering whole lines.
    """

    __slots__ = ("_source", "_text", "_pos", "_pending", "line", "column")

    def __init__(self, source: Union[str, TextIO]):
        self._source = None if isinstance(source, str) else source
        self._text = source if isinstance(source, str) else ""
        self._pos = 0
        self._pending: str | None = None
        self.line = 1
        self.column = 0

    def _pull(self) -> str:
        if self._source is not None:
            return self._source.read(1)
        if self._pos < len(self._text):
            c = self._text[self._pos]
            self._pos += 1
            return c
        return EOF

    def peek(self) -> str:
        if self._pending is None:
            self._pending = self._pull()
        return self._pending

    def advance(self) -> str:
        if self._pending is not None:
            c, self._pending = self._pending, None
        else:
            c = self._pull()
        if c == "\n":
            self.line += 1
            self.column = 0
        elif c:
            self.column += 1
        return c

    def at_eof(self) -> bool:
        return self.peek() == EOF

    def position(self) -> str:
        return f"line {self.line}, column {self.column}"
