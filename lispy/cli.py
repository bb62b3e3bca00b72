#!/usr/bin/env python3
"""
Lispy CLI

Runs Lispy source files, or starts an interactive prompt when no file is given.

Usage:
    python -m lispy [files...] [options]

Examples:
    python -m lispy
    python -m lispy fib.lspy --no-prelude
    LISPY_RECURSION_LIMIT=50000 python -m lispy deep.lspy -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from lispy import __version__
from lispy.config import get_recursion_limit
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.types import Error

PROMPT = "lispy> "


def run_file(itp: Interpreter, path: str) -> int:
    """Evaluate every top-level expression of `path`, printing Error values."""
    try:
        code = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: Could not load file {path}: {exc.strerror}")
        return 1

    try:
        results = itp.eval_each(code)
    except LispySyntaxError as exc:
        print(f"{path}:{exc}")
        return 1

    for result in results:
        if isinstance(result, Error):
            print(result)
    return 0


def repl(itp: Interpreter) -> int:
    """Read lines until EOF, printing each result; Errors never end the session."""
    print(f"Lispy version {__version__}")
    print("Press Ctrl+C to exit\n")

    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        if not line.strip():
            continue

        try:
            result = itp.eval(line)
        except LispySyntaxError as exc:
            print(f"<stdin>:{exc}")
            continue
        print(result)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="lispy",
        description="Evaluate Lispy S-expressions and Q-expressions.",
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Source files to run; starts the REPL when omitted",
    )

    parser.add_argument(
        "--no-prelude",
        action="store_true",
        dest="no_prelude",
        help="Start with builtins only, without the standard prelude",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log evaluation details to stderr",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.setrecursionlimit(get_recursion_limit())

    itp = Interpreter(prelude=None if args.no_prelude else 'auto')

    if not args.files:
        return repl(itp)

    status = 0
    for path in args.files:
        status = run_file(itp, path) or status
    return status


if __name__ == "__main__":
    sys.exit(main())
