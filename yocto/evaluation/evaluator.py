"""Core evaluator for the Yocto interpreter.

Implements macro expansion, special-form dispatch and function application
by direct recursion over the expression tree. There is no tail-call
elimination: deep recursion in user programs surfaces as Python's
RecursionError.
"""

from __future__ import annotations

from yocto import SExpression, LispValue
from yocto.types.environment import Environment
from yocto.types.nil import Nil
from yocto.types.splice import flatten_into
from yocto.types.symbol import Symbol
from yocto.evaluation.apply import apply
from yocto.evaluation.macro_expander import try_expand
from yocto.evaluation.special_forms import SPECIAL_FORMS
from yocto.evaluation.special_forms.eval_form import eval_form


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value.

    Errors are raised as YoctoError subclasses and are never recovered from
    here; they surface unchanged to the caller.
    """
    if isinstance(expr, Symbol):
        return env.lookup(expr)

    # --- Atoms return as-is ---
    if not isinstance(expr, list):
        return expr

    if not expr:
        return Nil

    # Head-position macro: evaluate the expansion through the eval rule, so a
    # macro that expands into another macro call is expanded again.
    expanded, did_expand = try_expand(expr, env, evaluate)
    if did_expand:
        return eval_form([expanded], env, evaluate)

    head, *tail_args = expr

    # --- Special forms handling ---
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        return SPECIAL_FORMS[head](tail_args, env, evaluate)

    fn = evaluate(head, env)
    args: list[LispValue] = []
    for arg in tail_args:
        flatten_into(args, evaluate(arg, env))
    return apply(fn, args, env, evaluate)
