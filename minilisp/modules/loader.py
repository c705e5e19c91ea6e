from __future__ import annotations
from pathlib import Path
from typing import Protocol, Union

from minilisp.config import get_prelude_root


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def load_file(itp: _HasEvalPrelude, path: Union[str, Path]) -> None:
    """Evaluate every form of a Lisp source file for its side effects."""
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Cannot find Lisp source '{p}'")
    itp.eval_prelude(p.read_text(encoding='utf-8'))


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Load std.lisp from the prelude directory (MINILISP_PRELUDE_PATH)."""
    load_file(itp, get_prelude_root() / 'std.lisp')
