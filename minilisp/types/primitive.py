"""Native callables exposed to Lisp code."""

from __future__ import annotations

from typing import Callable, Optional

from minilisp import LispValue
from minilisp.errors import LispArityError


class Primitive:
    """A built-in operation.

    `special` selects the calling convention:

    - special=False: arguments are evaluated left to right by the apply
      engine and the function is called as ``fn(env, args)``.
    - special=True: the function receives the unevaluated argument
      expressions as ``fn(tail, env, evaluate_fn)`` and decides itself
      whether and when to evaluate them (if, quote, while, lambda, ...).

    `min_args`/`max_args` are checked before any argument is evaluated.
    """

    __slots__ = ("name", "fn", "special", "min_args", "max_args")

    def __init__(
        self,
        name: str,
        fn: Callable[..., LispValue],
        special: bool = False,
        min_args: int = 0,
        max_args: Optional[int] = None,
    ):
        self.name = name
        self.fn = fn
        self.special = special
        self.min_args = min_args
        self.max_args = max_args

    def check_arity(self, count: int) -> None:
        lo, hi = self.min_args, self.max_args
        if lo <= count and (hi is None or count <= hi):
            return
        if hi is None:
            expected = f"at least {lo}"
        elif lo == hi:
            expected = f"exactly {lo}"
        else:
            expected = f"{lo} to {hi}"
        plural = "" if (hi if hi is not None else lo) == 1 else "s"
        raise LispArityError(
            f"{self.name} accepts {expected} argument{plural}, got {count}"
        )

    def __repr__(self) -> str:
        kind = "special form" if self.special else "primitive"
        return f"<{kind} {self.name}>"
