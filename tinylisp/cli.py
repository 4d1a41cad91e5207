"""Command-line entry point: ``tinylisp [file]``."""

from __future__ import annotations

import argparse
import logging
import sys

from tinylisp import __version__, config
from tinylisp.errors import LispError
from tinylisp.interpreter import Interpreter
from tinylisp.observability import setup_logging
from tinylisp.repl import Repl, run_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinylisp",
        description=(
            "If no file is provided, starts interactive REPL mode. "
            "If a file is provided, evaluates the file and exits."
        ),
    )
    parser.add_argument("file", nargs="?", help="source file to evaluate")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def make_interpreter() -> Interpreter:
    interpreter = Interpreter()
    prelude = config.get_prelude_path()
    if prelude is not None:
        logger.info("loading prelude %s", prelude)
        interpreter.eval_prelude(prelude.read_text(encoding="utf-8"))
    return interpreter


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging(config.get_log_level())
        limit = config.get_recursion_limit()
        if limit is not None:
            sys.setrecursionlimit(limit)
        interpreter = make_interpreter()
    except (ValueError, OSError, LispError) as err:
        print(f"Fatal error: {err}", file=sys.stderr)
        return 1

    if args.file is None:
        Repl(interpreter, prompt=config.get_prompt()).run()
        return 0
    return run_file(args.file, interpreter)


if __name__ == "__main__":
    sys.exit(main())
