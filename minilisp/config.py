from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (minilisp package directory)
_MINILISP_DIR = Path(__file__).resolve().parent

# Defaults
DEFAULT_SYMBOL_MAX_LENGTH = 128
DEFAULT_INTEGER_BITS = 32
DEFAULT_SCOPING = 'lexical'
DEFAULT_RECURSION_LIMIT = 10000
SCOPING_POLICIES = ('lexical', 'dynamic')
_DEFAULT_PRELUDE_DIR = _MINILISP_DIR / 'prelude'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_symbol_max_length() -> int:
    return int_from_env('MINILISP_SYMBOL_MAX_LENGTH', DEFAULT_SYMBOL_MAX_LENGTH)


def get_integer_bits() -> int:
    return int_from_env('MINILISP_INTEGER_BITS', DEFAULT_INTEGER_BITS)


def get_recursion_limit() -> int:
    return int_from_env('MINILISP_RECURSION_LIMIT', DEFAULT_RECURSION_LIMIT)


def get_scoping() -> str:
    raw = os.environ.get('MINILISP_SCOPING', '').strip().lower()
    return raw if raw in SCOPING_POLICIES else DEFAULT_SCOPING


def get_prelude_root() -> Path:
    roots = paths_from_env('MINILISP_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent
