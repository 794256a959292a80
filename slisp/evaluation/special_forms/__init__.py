"""Registry of special forms for the slisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation
rules. Every handler takes (tail, env, evaluate_fn), where tail is the form
without its head symbol. The evaluator consults this table before treating a
symbol-headed list as a function call, so these names cannot be shadowed by
user bindings.
"""

from slisp.types.symbol import Symbol
from slisp.evaluation.special_forms.arithmetic_forms import OPERATORS, binary_op_form
from slisp.evaluation.special_forms.not_form import not_form
from slisp.evaluation.special_forms.let_form import let_form
from slisp.evaluation.special_forms.fn_form import fn_form
from slisp.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    **{Symbol(name): binary_op_form(name) for name in OPERATORS},
    Symbol("not"): not_form,
    Symbol("let"): let_form,
    Symbol("fn"): fn_form,
    Symbol("cond"): cond_form,
}
