"""Core evaluator for the tinylisp interpreter.

A direct recursive tree walker. Expressions are classified by shape:
self-evaluating atoms, symbols (looked up in the environment) and Cons
cells (special form or application).
"""

from __future__ import annotations

from tinylisp import SExpression, LispValue
from tinylisp.errors import EvalError, MalformedExpression, MalformedSpecialForm
from tinylisp.evaluation.apply import apply
from tinylisp.evaluation.special_forms import SPECIAL_FORMS
from tinylisp.printer import to_string
from tinylisp.types.cons import Cons, is_proper_list
from tinylisp.types.environment import Environment
from tinylisp.types.nil import NilType
from tinylisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case float() | str() | NilType():
            return expr

        case Symbol():
            return env.lookup(expr)

        case Cons(car=head, cdr=rest):
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                if not is_proper_list(rest):
                    raise MalformedSpecialForm(f"{head} form must be a proper list")
                return SPECIAL_FORMS[head](list(rest), env, evaluate)

            fn = evaluate(head, env)
            if not is_proper_list(rest):
                raise MalformedExpression(f"Improper argument list in {to_string(expr)}")
            # Left to right, in the caller's environment
            args = [evaluate(arg, env) for arg in rest]
            return apply(fn, args, env, evaluate)

    raise EvalError(f"Cannot evaluate expression: {to_string(expr)}")
