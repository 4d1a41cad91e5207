"""Interactive read-eval-print loop and batch file runner.

The REPL reads one line at a time, evaluates every form on it and prints the
last value. Errors are reported and the loop carries on with a fresh prompt.
Batch mode evaluates a whole file and prints only the final value; the first
error aborts the run.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO

from tinylisp import __version__
from tinylisp.errors import LispError
from tinylisp.interpreter import Interpreter
from tinylisp.printer import to_string

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"quit", "exit", ":q"})

BANNER = (
    f"Tiny Lisp Interpreter v{__version__}\n"
    "Type expressions to evaluate, or 'quit' to exit.\n"
    "Example: (+ 1 2 3)\n"
)


class Repl:
    """Line-oriented REPL over arbitrary text streams."""

    def __init__(
        self,
        interpreter: Interpreter | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
        prompt: str = "lisp> ",
    ) -> None:
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt
        self.running = False

    def read_line(self) -> str | None:
        """Print the prompt and read one line; None at end of input."""
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def eval_line(self, line: str) -> None:
        """Evaluate one line and print the value of its last form."""
        try:
            values = self.interpreter.eval_all(line)
        except LispError as err:
            logger.debug("error in %r", line, exc_info=True)
            print(f"Error: {err}", file=self.stdout)
            return
        except Exception as err:
            logger.debug("unexpected error in %r", line, exc_info=True)
            print(f"Error: {err}", file=self.stdout)
            return
        if values:
            print(to_string(values[-1]), file=self.stdout)

    def run(self) -> None:
        self.stdout.write(BANNER + "\n")
        self.running = True
        while self.running:
            line = self.read_line()
            if line is None:
                self.stdout.write("\n")
                break
            command = line.strip()
            if command in QUIT_COMMANDS:
                self.stop()
                continue
            if not command:
                continue
            self.eval_line(line)
        print("Goodbye!", file=self.stdout)

    def stop(self) -> None:
        self.running = False


def run_file(
    path: str | Path,
    interpreter: Interpreter | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> int:
    """Evaluate a source file, print its last value and return an exit status."""
    interpreter = interpreter if interpreter is not None else Interpreter()
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        source = Path(path).read_text(encoding="utf-8")
    except OSError as err:
        print(f"Error: Could not open file '{path}': {err.strerror}", file=stderr)
        return 1
    except UnicodeDecodeError as err:
        print(f"Error: Could not read file '{path}': {err}", file=stderr)
        return 1

    try:
        values = interpreter.eval_all(source)
    except LispError as err:
        logger.debug("error while running %s", path, exc_info=True)
        print(f"Error: {err}", file=stderr)
        return 1

    if values:
        print(to_string(values[-1]), file=stdout)
    return 0
