"""Quasiquote template expansion.

Templates are walked with a nesting depth. Depth 0 is the direct argument of
`quasiquote` (or a macro body form); every nested `quasiquote` adds one level
and every `unquote`/`unquote-splicing` above depth 0 removes one. Only forms
at depth 0 are live:

- a name bound in the environment is replaced by its value,
- (unquote x) is replaced by the value of x,
- (unquote-splicing x) contributes the elements of x's value to the
  enclosing list.

Everything else is rebuilt as new lists; the template is never mutated.
"""

from __future__ import annotations

from yocto import EvaluatorFn, SExpression, LispValue
from yocto.errors import YoctoArityError, YoctoTypeError
from yocto.types.environment import Environment
from yocto.types.splice import SplicedList, flatten_into
from yocto.types.symbol import Symbol

QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")


def _single_argument(form: list[SExpression]) -> SExpression:
    if len(form) != 2:
        raise YoctoArityError(f"{form[0]} requires exactly one argument")
    return form[1]


def splice_value(value: LispValue) -> SplicedList:
    if not isinstance(value, list):
        raise YoctoTypeError(
            f"unquote-splicing argument must evaluate to a list, got {value!r}"
        )
    return SplicedList(value)


def expand_template(
    expr: SExpression,
    env: Environment,
    depth: int,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Expand a quasiquote template at the given nesting depth.

    May return a SplicedList when `expr` itself is a live unquote-splicing
    form; callers building lists flatten it in place.
    """
    if isinstance(expr, Symbol):
        if depth == 0:
            bound = env.find(expr)
            if bound is not None:
                return bound.vars[expr]
        return expr

    # Non-list atoms returned as-is
    if not isinstance(expr, list) or not expr:
        return expr

    head = expr[0]
    if head == QUASIQUOTE:
        inner = _single_argument(expr)
        return [QUASIQUOTE, expand_template(inner, env, depth + 1, evaluate_fn)]

    if head == UNQUOTE or head == UNQUOTE_SPLICING:
        inner = _single_argument(expr)
        if depth > 0:
            return [head, expand_template(inner, env, depth - 1, evaluate_fn)]
        value = evaluate_fn(inner, env)
        if head == UNQUOTE:
            return value
        return splice_value(value)

    result: list[LispValue] = []
    for item in expr:
        flatten_into(result, expand_template(item, env, depth, evaluate_fn))
    return result


def expand_body_form(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Expand one macro body form.

    A backquoted body form is the template itself: its unquotes are live at
    depth 0 and the expansion keeps the quasiquote wrapper, which the
    evaluator unwraps. Other body forms expand as depth-0 templates.
    """
    if isinstance(form, list) and form and form[0] == QUASIQUOTE:
        return [QUASIQUOTE, expand_template(_single_argument(form), env, 0, evaluate_fn)]
    return expand_template(form, env, 0, evaluate_fn)
