"""Macro expansion for Yocto.

Macros are ordinary values bound in the environment by `defmacro`. A list
whose head names a Macro is rewritten by binding the raw argument forms in a
child of the *expansion-site* environment and template-expanding the macro
body there. Expansion is unhygienic: templates see, and may capture, names
from the call site.
"""

from __future__ import annotations

import logging
from typing import Optional

from yocto import EvaluatorFn, SExpression
from yocto.types.environment import Environment
from yocto.types.macro import Macro
from yocto.types.nil import Nil
from yocto.types.symbol import Symbol
from yocto.evaluation.quasiquote import expand_body_form

logger = logging.getLogger(__name__)


def macro_at_head(expr: SExpression, env: Environment) -> Optional[Macro]:
    """Return the Macro named by the head of `expr`, if any.

    Template expansion substitutes bound names, so a macro invocation built
    by a template may carry the Macro value itself in head position.
    """
    if not isinstance(expr, list) or not expr:
        return None
    head = expr[0]
    if isinstance(head, Macro):
        return head
    if not isinstance(head, Symbol):
        return None
    bound = env.find(head)
    if bound is None:
        return None
    value = bound.vars[head]
    return value if isinstance(value, Macro) else None


def expand_macro(
    macro: Macro, args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> SExpression:
    """Expand one macro invocation.

    Every body form is expanded in order; only the last expansion is returned,
    the same "last wins" rule `do` uses. Earlier forms run for their
    unquote side effects alone.
    """
    macro_env = macro.extend_env(args, env)
    expansion: SExpression = Nil
    for form in macro.body:
        expansion = expand_body_form(form, macro_env, evaluate_fn)
    return expansion


def try_expand(
    expr: SExpression, env: Environment, evaluate_fn: EvaluatorFn
) -> tuple[SExpression, bool]:
    """Expand `expr` until its head no longer names a macro.

    Returns (expression, expanded). The expression is returned unchanged with
    expanded=False when its head is not a bound macro. A macro that keeps
    expanding into another invocation of itself never terminates.
    """
    expanded = False
    while (macro := macro_at_head(expr, env)) is not None:
        result = expand_macro(macro, expr[1:], env, evaluate_fn)
        logger.debug("macroexpand %s: %r -> %r", macro.name, expr, result)
        expr = result
        expanded = True
    return expr, expanded
