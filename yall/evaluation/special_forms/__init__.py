"""Registry of special forms for the yall evaluator.

Maps names to handlers that receive the calling environment and the
unevaluated argument list. Every new global environment binds each entry as
a SpecialForm value; the evaluator then dispatches on that value's type.
"""

from types import MappingProxyType

from yall.evaluation.special_forms.define_form import define_form, defn_form, defmacro_form
from yall.evaluation.special_forms.if_form import if_form
from yall.evaluation.special_forms.inc_form import inc_form
from yall.evaluation.special_forms.lambda_form import lambda_form, macro_form
from yall.evaluation.special_forms.load_form import load_form

SPECIAL_FORMS = MappingProxyType({
    "def": define_form,
    "lambda": lambda_form,
    "fn": lambda_form,
    "macro": macro_form,
    "defn": defn_form,
    "defmacro": defmacro_form,
    "if": if_form,
    "inc!": inc_form,
    "load": load_form,
})
