"""Registry of special forms for the Sprig evaluator.

Maps keyword Symbols to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary function
application; a head Symbol missing from it is treated as a call.
"""

from sprig.types.symbol import Symbol
from sprig.evaluation.special_forms.quote_form import quote_form
from sprig.evaluation.special_forms.lambda_form import lambda_form
from sprig.evaluation.special_forms.define_form import define_form
from sprig.evaluation.special_forms.set_form import set_form
from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.cond_form import cond_form
from sprig.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("lambda"): lambda_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
    Symbol("begin"): begin_form,
}
