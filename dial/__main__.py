"""Command-line shell for Dial.

    dial                 interactive REPL
    dial FILE            evaluate every expression in FILE
    dial -e EXPR         evaluate EXPR and print each result
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, TextIO

from dial import __version__
from dial.config import get_log_level, get_prompt
from dial.errors import DialError
from dial.interpreter import Interpreter
from dial.printer import pr_str

logger = logging.getLogger(__name__)


def eval_and_print(interp: Interpreter, code: str, out: TextIO) -> bool:
    """Evaluate `code`, printing each result or the error. Returns False on error."""
    try:
        for expr in interp.read(code):
            out.write(pr_str(interp.eval_expr(expr)) + "\n")
    except DialError as e:
        logger.debug("evaluation failed", exc_info=True)
        out.write(f"error: {e}\n")
        return False
    return True


def repl(
    interp: Interpreter | None = None,
    input_fn: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> None:
    """Read lines until EOF or Ctrl-C; errors are reported and the session goes on."""
    interp = interp or Interpreter()
    out = out or sys.stdout
    prompt = get_prompt()
    while True:
        try:
            line = input_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            out.write("\n")
            break
        if line.strip():
            eval_and_print(interp, line, out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dial", description="Dial Lisp interpreter")
    parser.add_argument("file", nargs="?", help="Path to a Dial source file")
    parser.add_argument("-e", "--expr", help="Evaluate an expression and print its results")
    parser.add_argument("--log-level", help="Logging level (default from DIAL_LOG_LEVEL)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_log_level(args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interp = Interpreter()
    if args.expr is not None:
        return 0 if eval_and_print(interp, args.expr, sys.stdout) else 1
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            source = f.read()
        try:
            interp.eval_all(source)
        except DialError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        return 0
    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
