from __future__ import annotations
import sys
from typing import Optional, TextIO

from minilisp.config import get_scoping, SCOPING_POLICIES

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_current_output: Optional[TextIO] = None
_current_scoping: Optional[str] = None


def set_current_output(stream: Optional[TextIO]) -> None:
    global _current_output
    _current_output = stream


def get_current_output() -> TextIO:
    # Resolve sys.stdout lazily so pytest's capsys sees println output
    return _current_output if _current_output is not None else sys.stdout


def set_current_scoping(policy: Optional[str]) -> None:
    global _current_scoping
    if policy is not None and policy not in SCOPING_POLICIES:
        raise ValueError(f"Unknown scoping policy: {policy!r}")
    _current_scoping = policy


def get_current_scoping() -> str:
    return _current_scoping if _current_scoping is not None else get_scoping()
