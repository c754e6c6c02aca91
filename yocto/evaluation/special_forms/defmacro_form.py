"""Special form: defmacro.

Binds a Macro value under its name in the current environment.
"""

from __future__ import annotations

import logging

from yocto import EvaluatorFn, SExpression, LispValue
from yocto.errors import YoctoArityError, YoctoInvalidSymbol, YoctoMalformedForm
from yocto.types.symbol import Symbol
from yocto.types.macro import Macro
from yocto.types.environment import Environment

logger = logging.getLogger(__name__)

REST_MARKER = Symbol("...")


def parse_macro_params(params: list[SExpression]) -> tuple[list[Symbol], Symbol | None]:
    """Split `(a b ... rest)` into fixed parameters and the rest parameter."""
    fixed: list[Symbol] = []
    for i, param in enumerate(params):
        if param == REST_MARKER:
            remaining = params[i + 1:]
            if len(remaining) != 1 or not isinstance(remaining[0], Symbol):
                raise YoctoMalformedForm("... must be followed by exactly one parameter name")
            return fixed, remaining[0]
        if not isinstance(param, Symbol):
            raise YoctoInvalidSymbol(f"Macro parameter must be a name, got {param!r}")
        fixed.append(param)
    return fixed, None


def defmacro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(defmacro (name params... [... rest]) body...)"""
    if len(tail) < 2:
        raise YoctoArityError("defmacro requires a signature and at least one body form")

    signature, *body = tail
    if not isinstance(signature, list) or not signature:
        raise YoctoMalformedForm(
            "first argument to defmacro must be a list containing at least the macro name"
        )
    macro_name, *params = signature
    if not isinstance(macro_name, Symbol):
        raise YoctoMalformedForm(f"Macro name must be a name, got {macro_name!r}")

    fixed, rest_param = parse_macro_params(params)
    macro = Macro(fixed, body, rest_param, name=macro_name)
    env.define(macro_name, macro)
    logger.debug("defmacro %r", macro)
    return macro
