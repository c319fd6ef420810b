"""Registry of special forms for the Dial evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so
these names cannot be rebound as functions.

Handlers take (tail, env, evaluate_fn) and return either a value or a
TailCall for the sub-expression in tail position.
"""

from dial.types.symbol import Symbol
from dial.evaluation.special_forms.define_form import define_form
from dial.evaluation.special_forms.let_form import let_form
from dial.evaluation.special_forms.if_form import if_form
from dial.evaluation.special_forms.lambda_form import lambda_form
from dial.evaluation.special_forms.do_form import do_form

SPECIAL_FORMS = {
    Symbol("def"): define_form,
    Symbol("let"): let_form,
    Symbol("if"): if_form,
    Symbol("fn"): lambda_form,
    Symbol("do"): do_form,
}
