"""Registry of special forms for the Yocto evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
Handlers receive the unevaluated argument forms, the current environment and
the evaluator, and decide themselves what to evaluate and when. The evaluator
consults this table after macro expansion and before ordinary function
application.
"""

from yocto.types.symbol import Symbol
from yocto.evaluation.special_forms.define_form import define_form
from yocto.evaluation.special_forms.defmacro_form import defmacro_form
from yocto.evaluation.special_forms.eval_form import eval_form
from yocto.evaluation.special_forms.if_form import if_form
from yocto.evaluation.special_forms.lambda_form import defn_form, lambda_form
from yocto.evaluation.special_forms.logic_forms import and_form, or_form, true_form, false_form
from yocto.evaluation.special_forms.progn_form import progn_form
from yocto.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, unquote_form, unquote_splice_form
from yocto.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    Symbol("def"): define_form,
    Symbol("defn"): defn_form,
    Symbol("lambda"): lambda_form,
    Symbol("set!"): set_form,
    Symbol("if"): if_form,
    Symbol("do"): progn_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("unquote"): unquote_form,
    Symbol("unquote-splicing"): unquote_splice_form,
    Symbol("defmacro"): defmacro_form,
    Symbol("eval"): eval_form,
    Symbol("true"): true_form,
    Symbol("false"): false_form,
}
