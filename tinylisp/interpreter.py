from __future__ import annotations

import logging

from tinylisp import LispValue
from tinylisp.builtin.env_builtin import register
from tinylisp.errors import RecursionLimitExceeded
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.printer import to_string
from tinylisp.reader.lexer import lex
from tinylisp.reader.parser import TokenStream
from tinylisp.types.environment import Environment
from tinylisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns the global environment and evaluates source text form by form.
    Definitions persist across calls to `eval`.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)
        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of Lisp code, discarding the results."""
        for _ in self.iter_eval(code):
            pass

    def iter_eval(self, code: str):
        """Yield the value of each top-level form as it is evaluated.

        Forms are read lazily, so an error in a later form leaves the effects
        of earlier forms in place.
        """
        stream = TokenStream(lex(code))
        while True:
            try:
                expr = stream.parse_expr()
                if expr is None:
                    return
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("evaluating %s", to_string(expr))
                value = evaluate(expr, self.env)
            except RecursionError as err:
                # Deeply nested input or runaway recursion exhausted the host stack
                raise RecursionLimitExceeded("Maximum recursion depth exceeded") from err
            yield value

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every form in `code` and return all of their values."""
        return list(self.iter_eval(code))

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last value (nil if none)."""
        result: LispValue = Nil
        for result in self.iter_eval(code):
            pass
        return result

    def reset(self) -> None:
        """Drop all user definitions and start from a fresh global frame."""
        self.env = Environment()
        register(self.env)
