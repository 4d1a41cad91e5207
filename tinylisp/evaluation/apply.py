"""Application engine for tinylisp.

Centralizes function application semantics: builtins are called with the
evaluated argument list and the caller's environment; closures get a fresh
frame, child of their captured environment, with parameters bound
positionally. There is no partial application and no tail-call trampoline,
so every closure call is a nested Python call.
"""

from tinylisp import LispValue, EvaluatorFn
from tinylisp.errors import NotCallable
from tinylisp.printer import to_string
from tinylisp.types.builtin_fn import Builtin
from tinylisp.types.closure import Closure
from tinylisp.types.environment import Environment


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    Raises ArityMismatch unless the argument count equals the parameter count.
    """
    frame = fn.extend_env(args)
    return evaluate_fn(fn.body, frame)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Builtin.

    - For Closure, defer to apply_closure.
    - For Builtin, invoke with the runtime env and list of args.
    - Otherwise, raise NotCallable.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Builtin):
        return head(env, args)
    else:
        raise NotCallable(f"Cannot call non-function: {to_string(head)}")
