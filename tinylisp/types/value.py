"""Constructors, predicates and checked accessors for every value variant.

The variants are: Nil, Number (float), String (str), Symbol, Cons, Builtin and
Closure. Accessors raise TypeMismatch when handed the wrong variant, which is
how builtins report bad arguments.
"""

from __future__ import annotations

from tinylisp import LispValue, SExpression
from tinylisp.errors import TypeMismatch
from tinylisp.types.builtin_fn import Builtin, BuiltinFunction
from tinylisp.types.closure import Closure
from tinylisp.types.cons import Cons
from tinylisp.types.environment import Environment
from tinylisp.types.nil import Nil, NilType
from tinylisp.types.symbol import Symbol


# -------------------------------
# Constructors
# -------------------------------
def make_nil() -> NilType:
    return Nil


def make_number(n: float) -> float:
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise TypeMismatch(f"Cannot make a number from {n!r}")
    return float(n)


def make_string(text: str) -> str:
    return str(text)


def make_symbol(name: str) -> Symbol:
    return Symbol(name)


def make_cons(car: LispValue, cdr: LispValue) -> Cons:
    return Cons(car, cdr)


def make_builtin(name: str, fn: BuiltinFunction) -> Builtin:
    return Builtin(name, fn)


def make_closure(params: list[Symbol], body: SExpression, env: Environment) -> Closure:
    return Closure(params, body, env)


# -------------------------------
# Predicates
# -------------------------------
def is_nil(v: LispValue) -> bool:
    return isinstance(v, NilType)


def is_number(v: LispValue) -> bool:
    return isinstance(v, float)


def is_string(v: LispValue) -> bool:
    return isinstance(v, str)


def is_symbol(v: LispValue) -> bool:
    return isinstance(v, Symbol)


def is_cons(v: LispValue) -> bool:
    return isinstance(v, Cons)


def is_builtin(v: LispValue) -> bool:
    return isinstance(v, Builtin)


def is_closure(v: LispValue) -> bool:
    return isinstance(v, Closure)


def type_name(v: LispValue) -> str:
    """Variant name used in error messages."""
    match v:
        case NilType():
            return "nil"
        case float():
            return "number"
        case str():
            return "string"
        case Symbol():
            return "symbol"
        case Cons():
            return "cons"
        case Builtin():
            return "builtin"
        case Closure():
            return "lambda"
    return type(v).__name__


# -------------------------------
# Checked accessors
# -------------------------------
def _mismatch(expected: str, v: LispValue) -> TypeMismatch:
    return TypeMismatch(f"Expected {expected}, got {type_name(v)}")


def as_number(v: LispValue) -> float:
    if not is_number(v):
        raise _mismatch("number", v)
    return v


def as_string(v: LispValue) -> str:
    if not is_string(v):
        raise _mismatch("string", v)
    return v


def as_symbol(v: LispValue) -> str:
    if not is_symbol(v):
        raise _mismatch("symbol", v)
    return v.id


def as_cons(v: LispValue) -> tuple[LispValue, LispValue]:
    if not is_cons(v):
        raise _mismatch("cons", v)
    return v.car, v.cdr


def as_builtin(v: LispValue) -> Builtin:
    if not is_builtin(v):
        raise _mismatch("builtin", v)
    return v


def as_closure(v: LispValue) -> Closure:
    if not is_closure(v):
        raise _mismatch("lambda", v)
    return v
