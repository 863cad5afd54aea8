"""Registry of special forms for the minilisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so no
special-form keyword can be shadowed by a variable.
"""

from minilisp.types.symbol import Symbol
from minilisp.evaluation.special_forms.quote_form import quote_form
from minilisp.evaluation.special_forms.define_form import define_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form
from minilisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("if"): if_form,
}
