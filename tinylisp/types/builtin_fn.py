"""Host-implemented callables exposed to Lisp code."""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from tinylisp import LispValue

if TYPE_CHECKING:
    from tinylisp.types.environment import Environment

BuiltinFunction = Callable[["Environment", list[LispValue]], LispValue]


class Builtin:
    """A named native function called as ``fn(env, args)``."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFunction):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"

    def __str__(self) -> str:
        return "#<builtin>"
