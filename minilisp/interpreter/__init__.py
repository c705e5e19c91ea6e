from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, TextIO, Union

from minilisp import SExpression, LispValue
from minilisp.builtin.env_builtin import make_root_environment
from minilisp.config import get_scoping
from minilisp.errors import LispError, LispRecursionError
from minilisp.evaluation.evaluator import evaluate
from minilisp.printer import to_str
from minilisp.reader.parser import Reader
from minilisp.runtime_context import set_current_output, set_current_scoping
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil

logger = logging.getLogger(__name__)


@dataclass
class EvalResult:
    """Outcome of `Interpreter.try_eval`: a value, or the error that stopped evaluation."""

    ok: bool
    value: LispValue = None
    error: Optional[LispError] = None

    @property
    def kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    def __str__(self) -> str:
        if self.ok:
            return to_str(self.value)
        return f"{self.error.kind}: {self.error}"


class Interpreter:
    """
    Orchestrates reading and evaluating minilisp code.
    Maintains a root Environment across calls, so definitions persist.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = None,
        *,
        scoping: Literal['lexical', 'dynamic'] | None = None,
        output: TextIO | None = None,
    ):
        self.scoping = scoping or get_scoping()
        self.output = output
        self._activate()
        self.env: Environment = make_root_environment()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from minilisp.modules.loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def _activate(self) -> None:
        # Runtime settings are process-global; install ours before evaluating
        set_current_scoping(self.scoping)
        set_current_output(self.output)

    def read(self, code: Union[str, TextIO]) -> list[SExpression]:
        """Read every expression in `code` without evaluating."""
        return list(Reader(code).read_all())

    def eval_expr(self, expr: SExpression) -> LispValue:
        """Evaluate one already-read expression in the root environment."""
        self._activate()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("eval %s", to_str(expr))
        try:
            return evaluate(expr, self.env)
        except RecursionError:
            raise LispRecursionError("maximum recursion depth exceeded") from None

    def eval_all(self, code: Union[str, TextIO]) -> list[LispValue]:
        """Read and evaluate each top-level form in order; return all values."""
        return [self.eval_expr(expr) for expr in Reader(code).read_all()]

    def eval(self, code: Union[str, TextIO]) -> LispValue:
        """Evaluate all forms in `code` and return the last value (Nil if none)."""
        results = self.eval_all(code)
        if not results:
            return Nil
        return results[-1]

    def eval_prelude(self, code: str) -> None:
        self.eval_all(code)

    def eval_file(self, path: Union[str, Path]) -> LispValue:
        with open(path, encoding='utf-8') as f:
            return self.eval(f)

    def try_eval(self, code: Union[str, TextIO]) -> EvalResult:
        """Like `eval`, but report a LispError as a failed result instead of raising."""
        try:
            value = self.eval(code)
        except LispError as exc:
            logger.info("%s: %s", exc.kind, exc)
            return EvalResult(ok=False, error=exc)
        return EvalResult(ok=True, value=value)
