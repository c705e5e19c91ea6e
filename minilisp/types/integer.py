"""Fixed-width integer arithmetic.

Lisp integers are plain Python ints kept inside a signed two's-complement
range, so `(* 65536 65536)` wraps exactly like a C `int` would.
"""
from __future__ import annotations

from minilisp.config import get_integer_bits


def fixnum(value: int, bits: int | None = None) -> int:
    """Wrap `value` into the signed range of the configured integer width."""
    if bits is None:
        bits = get_integer_bits()
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def is_integer(value) -> bool:
    # bool is an int subclass but never a Lisp value
    return isinstance(value, int) and not isinstance(value, bool)
