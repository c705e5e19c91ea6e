"""Cons cells and proper-list helpers.

A proper list is a chain of Pair cells whose final cdr is Nil. The car and
cdr slots are mutable, so two references to the same Pair observe each
other's `setcar`/`setcdr`.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from minilisp import LispValue
from minilisp.errors import LispTypeError
from minilisp.types.nil import Nil


class Pair:
    """A two-slot cell (car, cdr)."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car = car
        self.cdr = cdr

    # Structural comparison is for Python-side convenience only; the `eq`
    # primitive always compares by identity.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return a == b

    __hash__ = None  # mutable

    def __iter__(self) -> Iterator[LispValue]:
        return iter(to_list(self))

    def __repr__(self) -> str:
        from minilisp.printer import to_str
        return to_str(self)


def from_iterable(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a Lisp list from Python items, ending in `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def proper_length(value: LispValue) -> Optional[int]:
    """Length of a proper list, or None for an improper, circular or non-list value."""
    count = 0
    slow = value
    while isinstance(value, Pair):
        count += 1
        value = value.cdr
        # slow moves at half speed; meeting it means the cdr chain loops
        if count % 2 == 0:
            slow = slow.cdr
        if value is slow:
            return None
    return count if value is Nil else None


def to_list(value: LispValue, what: str = "argument list") -> list[LispValue]:
    """Convert a proper Lisp list to a Python list."""
    if proper_length(value) is None:
        raise LispTypeError(f"{what} must be a proper list")
    items: list[LispValue] = []
    node = value
    while isinstance(node, Pair):
        items.append(node.car)
        node = node.cdr
    return items


def is_list(value: LispValue) -> bool:
    return value is Nil or isinstance(value, Pair)
