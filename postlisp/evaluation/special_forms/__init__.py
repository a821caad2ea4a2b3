"""Registry of special forms for the PostLisp evaluator.

Maps form names to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before procedure application.
"""

from postlisp.evaluation.special_forms.define_form import define_form
from postlisp.evaluation.special_forms.begin_form import begin_form
from postlisp.evaluation.special_forms.if_form import if_form
from postlisp.evaluation.special_forms.draw_form import draw_form

SPECIAL_FORMS = {
    "define": define_form,
    "begin": begin_form,
    "if": if_form,
    "draw": draw_form,
}
