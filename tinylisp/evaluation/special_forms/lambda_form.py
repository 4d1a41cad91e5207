from tinylisp.errors import MalformedSpecialForm
from tinylisp.types.closure import Closure

from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.cons import is_proper_list
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) body): exactly one body expression, no implicit progn.
    if len(tail) != 2:
        raise MalformedSpecialForm("lambda requires a parameter list and exactly one body expression")

    params, body = tail
    if not is_proper_list(params):
        raise MalformedSpecialForm("lambda parameter list must be a proper list")

    formals = list(params)
    for param in formals:
        if not isinstance(param, Symbol):
            raise MalformedSpecialForm(f"lambda parameter must be a symbol, got {param!r}")

    # Captured by reference: later defines in env are visible to the body
    return Closure(formals, body, env)
