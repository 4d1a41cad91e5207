from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.errors import MalformedSpecialForm
from tinylisp.types.nil import Nil, NilType
from tinylisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not 2 <= len(tail) <= 3:
        raise MalformedSpecialForm(
            "if requires a condition, a then-expression and an optional else-expression"
        )

    cond = evaluate_fn(tail[0], env)
    # Only nil is false; #f, 0 and "" are ordinary truthy data
    if not isinstance(cond, NilType):
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
