"""Textual serialization of Lisp values.

- integers print in decimal
- symbols print their name
- Nil and T print as `Nil` and `True`
- primitives and closures print as opaque placeholders
- proper lists print as `(a b c)`; an improper tail prints as `(a b . c)`
- a pair reached again while it is still being printed prints as `...`
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minilisp import LispValue
from minilisp.errors import LispRecursionError
from minilisp.types.closure import Closure
from minilisp.types.nil import NilType, TrueType
from minilisp.types.pair import Pair
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol

CYCLE_MARKER = "..."


def write_value(value: LispValue, buffer: StringIO, _open: Optional[set[int]] = None) -> None:
    if isinstance(value, Pair):
        if _open is None:
            _open = set()
        if id(value) in _open:
            buffer.write(CYCLE_MARKER)
            return
        # ids of the cells of this list, open until its ')' is written
        cells = []
        buffer.write("(")
        node = value
        while True:
            cells.append(id(node))
            _open.add(id(node))
            write_value(node.car, buffer, _open)
            node = node.cdr
            if not isinstance(node, Pair) or id(node) in _open:
                break
            buffer.write(" ")
        if not isinstance(node, NilType):
            buffer.write(" . ")
            write_value(node, buffer, _open)
        buffer.write(")")
        _open.difference_update(cells)
    elif isinstance(value, NilType):
        buffer.write("Nil")
    elif isinstance(value, TrueType):
        buffer.write("True")
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, int):
        buffer.write(str(value))
    elif isinstance(value, Primitive):
        buffer.write("<primitive>")
    elif isinstance(value, Closure):
        buffer.write("<function>")
    else:
        buffer.write("unhandled")


def to_str(value: LispValue) -> str:
    """Return the printed form of `value`."""
    with StringIO() as buffer:
        try:
            write_value(value, buffer)
        except RecursionError:
            raise LispRecursionError("value nested too deeply to print") from None
        return buffer.getvalue()
