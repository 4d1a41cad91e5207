from tinylisp import SExpression, LispValue, EvaluatorFn
from tinylisp.errors import MalformedSpecialForm
from tinylisp.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote expr) returns expr unevaluated."""
    if len(tail) != 1:
        raise MalformedSpecialForm(f"quote requires exactly 1 argument, got {len(tail)}")
    return tail[0]
