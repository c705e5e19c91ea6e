"""minilisp command-line entry point.

Examples:
  python -m minilisp script.lisp          # run a script, stop at the first error
  python -m minilisp                      # interactive REPL on stdin
  python -m minilisp --scoping dynamic    # closures see their caller's frames
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from minilisp.config import SCOPING_POLICIES, get_recursion_limit
from minilisp.errors import LispError
from minilisp.interpreter import Interpreter
from minilisp.repl import run_stream

logger = logging.getLogger("minilisp")


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilisp",
        description="A minimal S-expression interpreter.",
    )
    parser.add_argument("script", nargs="?", help="Lisp source file to execute")
    parser.add_argument(
        "-i", "--interactive", action="store_true",
        help="start the REPL (default when no script is given)",
    )
    parser.add_argument(
        "--scoping", choices=SCOPING_POLICIES, default=None,
        help="closure scoping policy (default: $MINILISP_SCOPING or lexical)",
    )
    parser.add_argument(
        "--prelude", action="store_true", help="load the standard prelude first"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log evaluation at DEBUG level"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    try:
        interp = Interpreter(prelude="auto" if args.prelude else None, scoping=args.scoping)
    except LispError as exc:
        sys.stderr.write(f"{exc.kind}: {exc}\n")
        return 1
    except OSError as exc:
        sys.stderr.write(f"minilisp: cannot load prelude: {exc}\n")
        return 2

    if args.script:
        logger.info("running %s", args.script)
        try:
            with open(args.script, encoding="utf-8") as f:
                status = run_stream(interp, f, sys.stdout, sys.stderr)
        except OSError as exc:
            sys.stderr.write(f"minilisp: cannot open {args.script}: {exc.strerror}\n")
            return 2
        if status or not args.interactive:
            return status

    interactive = args.interactive or sys.stdin.isatty()
    return run_stream(
        interp, sys.stdin, sys.stdout, sys.stderr,
        echo=interactive, prompt=interactive, stop_on_error=not interactive,
    )


if __name__ == "__main__":
    sys.exit(main())
