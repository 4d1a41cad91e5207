"""Closure representation: parameters, body and captured environment."""

from __future__ import annotations

from io import StringIO

from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol
from tinylisp.errors import ArityMismatch


class Closure:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # Shared with the defining scope, never copied
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return "#<lambda>"

    def __repr__(self) -> str:
        from tinylisp.printer import to_string
        with StringIO() as buffer:
            buffer.write("<Closure (lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")>")
            return buffer.getvalue()

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` positionally in a new child of the captured environment."""
        if len(args) != self.arity:
            raise ArityMismatch(
                f"lambda expects {self.arity} arguments, got {len(args)}"
            )
        frame = self.env.extend()
        for param, arg in zip(self.params, args):
            frame.define(param, arg)
        return frame
