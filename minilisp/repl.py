"""Read-eval-print loop over a character stream.

`run_stream` is shared by the interactive REPL (echo results, report errors
and keep going) and the script runner (no echo, stop at the first error).
"""

from __future__ import annotations

import logging
from typing import TextIO

from minilisp.errors import LispError
from minilisp.interpreter import Interpreter
from minilisp.printer import to_str
from minilisp.reader.char_stream import EOF
from minilisp.reader.parser import Reader

logger = logging.getLogger(__name__)

PROMPT = "> "


def _skip_line(reader: Reader) -> None:
    # Drop the rest of a malformed line so reading resumes on the next one
    stream = reader.stream
    while stream.peek() not in ("\n", EOF):
        stream.advance()


def run_stream(
    interp: Interpreter,
    source: TextIO,
    out: TextIO,
    err: TextIO,
    *,
    echo: bool = False,
    prompt: bool = False,
    stop_on_error: bool = True,
) -> int:
    """Evaluate every top-level form read from `source`.

    Returns the process exit status: 0 when the stream was consumed, 1 when
    evaluation stopped at an error.
    """
    reader = Reader(source)
    while True:
        if prompt:
            out.write(PROMPT)
            out.flush()
        reading = True
        try:
            expr = reader.read()
            if expr is None:
                break
            reading = False
            value = interp.eval_expr(expr)
            text = to_str(value) if echo else None
        except LispError as exc:
            err.write(f"{exc.kind}: {exc}\n")
            err.flush()
            if stop_on_error:
                logger.info("stopping at %s", exc.kind)
                return 1
            if reading:
                _skip_line(reader)
            continue
        if echo:
            out.write(text)
            out.write("\n")
            out.flush()
    if prompt:
        out.write("\n")
    return 0
