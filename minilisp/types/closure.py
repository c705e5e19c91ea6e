"""User-defined functions created by `lambda` and `defun`."""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol


class Closure:
    """A first-class function with formal parameters, body, and defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(
        self, params: list[Symbol], body: list[SExpression], env: Environment
    ):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        self.env: Environment = env

    def __str__(self) -> str:
        from minilisp.printer import to_str
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")")
            for expr in self.body:
                buffer.write(" ")
                buffer.write(to_str(expr))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<function {self}>"
