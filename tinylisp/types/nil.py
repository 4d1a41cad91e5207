from __future__ import annotations


class NilType:
    """The empty list and the only false value."""

    __slots__ = ()

    def __repr__(self): return "nil"

    # Nil is equal only to Nil; no identity requirement
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0


Nil = NilType()
