"""Value model: the runtime variants and the environment chain."""

from tinylisp.types.nil import Nil, NilType
from tinylisp.types.symbol import Symbol
from tinylisp.types.cons import Cons, from_list, to_list, is_proper_list, last_tail
from tinylisp.types.environment import Environment
from tinylisp.types.builtin_fn import Builtin, BuiltinFunction
from tinylisp.types.closure import Closure

__all__ = [
    "Nil",
    "NilType",
    "Symbol",
    "Cons",
    "from_list",
    "to_list",
    "is_proper_list",
    "last_tail",
    "Environment",
    "Builtin",
    "BuiltinFunction",
    "Closure",
]
