from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.errors import MalformedSpecialForm
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only and returns the bound value.
    """
    if len(tail) != 2:
        raise MalformedSpecialForm("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalformedSpecialForm("define requires a symbol as first argument")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
