"""Registry of special forms for the Ember evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application. Each
handler is called as ``handler(tail, env, evaluate_fn, is_tail_call)``.
"""

from ember.types.symbol import Symbol
from ember.evaluation.special_forms.set_form import set_form
from ember.evaluation.special_forms.progn_form import progn_form
from ember.evaluation.special_forms.defmacro_form import defmacro_form
from ember.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, unquote_form
from ember.evaluation.special_forms.lambda_form import lambda_form
from ember.evaluation.special_forms.define_form import define_form, defun_form
from ember.evaluation.special_forms.if_form import if_form
from ember.evaluation.special_forms.cond_form import cond_form
from ember.evaluation.special_forms.let_form import let_form
from ember.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    Symbol("set"): set_form,
    Symbol("progn"): progn_form,
    Symbol("begin"): progn_form,
    Symbol("defmacro"): defmacro_form,
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("unquote"): unquote_form,
    Symbol("unquote-splicing"): unquote_form,
    Symbol("lambda"): lambda_form,
    Symbol("define"): define_form,
    Symbol("defun"): defun_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
    Symbol("let"): let_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
}
