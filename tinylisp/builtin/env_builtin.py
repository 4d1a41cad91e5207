"""Built-in functions for the tinylisp runtime environment.

This module defines arithmetic, comparison, list processing, type predicates
and output builtins, plus the `register` helper that installs them into the
global frame. Every builtin has the signature ``fn(env, args)`` and receives
already-evaluated arguments.
"""
from __future__ import annotations

import sys
from functools import reduce

from tinylisp import LispValue
from tinylisp.errors import ArityMismatch, DivisionByZero, TypeMismatch
from tinylisp.printer import to_string
from tinylisp.types.builtin_fn import Builtin, BuiltinFunction
from tinylisp.types.cons import Cons, from_list
from tinylisp.types.environment import Environment
from tinylisp.types.nil import Nil, NilType
from tinylisp.types.symbol import Symbol
from tinylisp.types.value import as_cons, is_nil, is_number, type_name

TRUE = Symbol("#t")
FALSE = Symbol("#f")


def _truth(flag: bool) -> LispValue:
    return TRUE if flag else Nil


def _expect_args(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        noun = "argument" if count == 1 else "arguments"
        raise ArityMismatch(f"{name} requires exactly {count} {noun}, got {len(args)}")


def _numbers(name: str, args: list[LispValue]) -> list[float]:
    for arg in args:
        if not is_number(arg):
            raise TypeMismatch(f"{name} requires numeric arguments, got {type_name(arg)}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the sum of all arguments; (+) is 0."""
    return reduce(lambda acc, x: acc + x, _numbers("+", args), 0.0)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments; (*) is 1."""
    return reduce(lambda acc, x: acc * x, _numbers("*", args), 1.0)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise ArityMismatch("- requires at least 1 argument")
    nums = _numbers("-", args)
    if len(nums) == 1:
        return -nums[0]
    return reduce(lambda acc, x: acc - x, nums[1:], nums[0])


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide the first number by the rest; reciprocal for one arg."""
    if not args:
        raise ArityMismatch("/ requires at least 1 argument")
    nums = _numbers("/", args)
    if len(nums) == 1:
        nums = [1.0, *nums]
    result = nums[0]
    for divisor in nums[1:]:
        if divisor == 0:
            raise DivisionByZero("Division by zero")
        result /= divisor
    return result


# -------------------------------
# Comparison
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> LispValue:
    """#t when both arguments are the same atom variant with equal value, or both nil."""
    _expect_args("=", args, 2)
    lhs, rhs = args
    if type(lhs) is not type(rhs):
        return Nil
    if isinstance(lhs, (float, str, Symbol, NilType)):
        return _truth(lhs == rhs)
    # Cons cells, builtins and closures never compare equal
    return Nil


def lt(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_args("<", args, 2)
    a, b = _numbers("<", args)
    return _truth(a < b)


def gt(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_args(">", args, 2)
    a, b = _numbers(">", args)
    return _truth(a > b)


# -------------------------------
# List operations
# -------------------------------
def car(env: Environment, args: list[LispValue]) -> LispValue:
    """First half of a pair; (car nil) is nil."""
    _expect_args("car", args, 1)
    if is_nil(args[0]):
        return Nil
    return as_cons(args[0])[0]


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Second half of a pair; (cdr nil) is nil."""
    _expect_args("cdr", args, 1)
    if is_nil(args[0]):
        return Nil
    return as_cons(args[0])[1]


def cons(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_args("cons", args, 2)
    return Cons(args[0], args[1])


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return from_list(args)


# -------------------------------
# Type predicates
# -------------------------------
def _predicate(name: str, test) -> BuiltinFunction:
    def check(env: Environment, args: list[LispValue]) -> LispValue:
        _expect_args(name, args, 1)
        return _truth(test(args[0]))
    check.__name__ = name
    return check


is_null = _predicate("null?", lambda v: isinstance(v, NilType))
is_number_p = _predicate("number?", lambda v: isinstance(v, float))
is_string_p = _predicate("string?", lambda v: isinstance(v, str))
is_symbol_p = _predicate("symbol?", lambda v: isinstance(v, Symbol))
is_cons_p = _predicate("cons?", lambda v: isinstance(v, Cons))


# -------------------------------
# Output
# -------------------------------
def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Write the rendered arguments, space separated, to stdout; returns nil."""
    sys.stdout.write(" ".join(to_string(a) for a in args) + "\n")
    return Nil


BUILTINS: dict[str, BuiltinFunction] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "list": list_builtin,
    "=": equals,
    "<": lt,
    ">": gt,
    "null?": is_null,
    "number?": is_number_p,
    "string?": is_string_p,
    "symbol?": is_symbol_p,
    "cons?": is_cons_p,
    "print": print_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    env.define(TRUE, TRUE)
    env.define(FALSE, FALSE)
