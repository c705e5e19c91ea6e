"""Runtime environment for minilisp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Each frame belongs to one closure call or to
the program root.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minilisp import LispValue
from minilisp.errors import LispTypeError, LispUndefinedSymbol
from minilisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Create a new empty frame chained to this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only.

        An existing binding of the same name in an outer frame is shadowed,
        never updated. Raises LispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises LispUndefinedSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise LispUndefinedSymbol(name)
        return env.vars[name]

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
