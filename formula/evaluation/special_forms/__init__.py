"""Registry of special forms for the Formula evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. The set is closed: names here can never be rebound.
"""

from formula.types.symbol import Symbol
from formula.evaluation.special_forms.if_form import if_form
from formula.evaluation.special_forms.define_form import define_form
from formula.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("begin"): begin_form,
}
