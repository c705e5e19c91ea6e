"""Registry of special forms for the minilisp evaluator.

Special forms are ordinary primitives that receive their arguments
unevaluated. Each entry maps a name to its handler and its (min, max) arity;
`minilisp.builtin.env_builtin.register` binds them into the root frame.
"""

from minilisp.evaluation.special_forms.progn_form import progn_form
from minilisp.evaluation.special_forms.quote_form import quote_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form
from minilisp.evaluation.special_forms.define_form import define_form, defun_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.while_form import while_form
from minilisp.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    "and": (and_form, 0, None),
    "or": (or_form, 0, None),
    "define": (define_form, 2, 2),
    "defun": (defun_form, 3, None),
    "if": (if_form, 2, 3),
    "lambda": (lambda_form, 2, None),
    "progn": (progn_form, 0, None),
    "quote": (quote_form, 1, 1),
    "while": (while_form, 2, None),
}
