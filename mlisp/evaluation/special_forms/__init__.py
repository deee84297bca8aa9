"""Registry of special forms for the mlisp evaluator.

Maps head symbol names to handlers that receive the *unevaluated* tail of the
form. The evaluator consults this table, in insertion order, before ordinary
function application.
"""

from mlisp.evaluation.special_forms.if_form import if_form
from mlisp.evaluation.special_forms.define_form import define_form
from mlisp.evaluation.special_forms.lambda_form import lambda_form, defn_form
from mlisp.evaluation.special_forms.defmacro_form import defmacro_form

SPECIAL_FORMS = {
    "if": if_form,
    "def": define_form,
    "defn": defn_form,
    "fn": lambda_form,
    "defmacro": defmacro_form,
}
