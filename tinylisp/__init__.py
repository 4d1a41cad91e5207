# Core type aliases for tinylisp's data model.
# Runtime values are plain Python objects: float for numbers, str for strings,
# plus the Nil, Symbol, Cons, Builtin and Closure classes in tinylisp.types.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (code and data are the same tree)
SExpression = LispValue

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

__version__ = "1.0.0"
