"""Immutable pair cells and helpers for walking Cons chains."""

from __future__ import annotations

from typing import Iterable, Iterator

from tinylisp import LispValue
from tinylisp.types.nil import Nil, NilType


class Cons:
    """A pair cell. Chains ending in Nil are proper lists."""

    __slots__ = ("car", "cdr")

    car: LispValue
    cdr: LispValue

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, name, value):
        raise AttributeError("Cons cells are immutable")

    def __eq__(self, other: object) -> bool:
        # Walk the spine iteratively so long lists do not recurse
        a: LispValue = self
        b: LispValue = other
        while isinstance(a, Cons) and isinstance(b, Cons):
            if a is b:
                return True
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        if isinstance(a, Cons) or isinstance(b, Cons):
            return False
        return type(a) is type(b) and a == b

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[LispValue]:
        """Iterate over the elements; an improper tail is not yielded."""
        node: LispValue = self
        while isinstance(node, Cons):
            yield node.car
            node = node.cdr

    def __repr__(self) -> str:
        from tinylisp.printer import to_string
        return f"Cons<{to_string(self)}>"


def from_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a chain from `items`, terminated by `tail` (Nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result


def last_tail(value: LispValue) -> LispValue:
    """Return whatever terminates the chain: Nil for a proper list."""
    while isinstance(value, Cons):
        value = value.cdr
    return value


def is_proper_list(value: LispValue) -> bool:
    return isinstance(last_tail(value), NilType)


def to_list(value: LispValue) -> list[LispValue]:
    """Flatten a proper list into a Python list.

    Raises ValueError if `value` is an improper chain or not a list at all;
    callers translate that into the error appropriate for their context.
    """
    if not is_proper_list(value):
        raise ValueError(f"not a proper list: {value!r}")
    return list(value)
