"""Registry of special forms for the tinylisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Each handler receives the unevaluated argument forms,
the current environment and the evaluator to recurse with.
"""

from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.special_forms.quote_forms import quote_form
from tinylisp.evaluation.special_forms.if_form import if_form
from tinylisp.evaluation.special_forms.define_form import define_form
from tinylisp.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
}
