"""Canonical text rendering of runtime values.

Integral numbers print without a decimal point, strings are wrapped in
double quotes without re-escaping, and Cons chains switch to dotted
notation at the first non-Nil, non-Cons tail.
"""

from __future__ import annotations

import math

from tinylisp import LispValue
from tinylisp.types.builtin_fn import Builtin
from tinylisp.types.closure import Closure
from tinylisp.types.cons import Cons
from tinylisp.types.nil import NilType
from tinylisp.types.symbol import Symbol


def format_number(n: float) -> str:
    if math.isfinite(n) and n.is_integer():
        return str(int(n))
    return repr(n)


def to_string(value: LispValue) -> str:
    match value:
        case NilType():
            return "nil"
        case float():
            return format_number(value)
        case str():
            return f'"{value}"'
        case Symbol():
            return value.id
        case Cons():
            return _list_to_string(value)
        case Builtin():
            return "#<builtin>"
        case Closure():
            return "#<lambda>"
    return f"#<unknown {type(value).__name__}>"


def _list_to_string(cell: Cons) -> str:
    parts: list[str] = []
    node: LispValue = cell
    while isinstance(node, Cons):
        parts.append(to_string(node.car))
        node = node.cdr
    if not isinstance(node, NilType):
        parts.append(".")
        parts.append(to_string(node))
    return "(" + " ".join(parts) + ")"
