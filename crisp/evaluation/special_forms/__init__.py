"""Registry of special forms for the crisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table by the head symbol's name before evaluating
anything, so special form names cannot be shadowed by bindings.
"""

from crisp.types.symbol import Symbol
from crisp.evaluation.special_forms.quote_form import quote_form
from crisp.evaluation.special_forms.def_form import def_form
from crisp.evaluation.special_forms.fn_form import fn_form
from crisp.evaluation.special_forms.if_form import if_form
from crisp.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("def"): def_form,
    Symbol("fn"): fn_form,
    Symbol("if"): if_form,
    Symbol("begin"): begin_form,
}
