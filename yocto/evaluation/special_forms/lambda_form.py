from __future__ import annotations

import logging

from yocto import EvaluatorFn
from yocto import SExpression, LispValue
from yocto.errors import YoctoArityError, YoctoInvalidSymbol, YoctoMalformedForm
from yocto.types.environment import Environment
from yocto.types.function import Function
from yocto.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _parse_params(params: list[SExpression], form: str) -> list[Symbol]:
    for param in params:
        if not isinstance(param, Symbol):
            raise YoctoInvalidSymbol(f"{form}: parameter must be a name, got {param!r}")
    return list(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda (params...) body...)

    Returns an anonymous Function closing over `env`.
    """
    if len(tail) < 2:
        raise YoctoArityError("lambda requires a parameter list and at least one body form")

    params, *body = tail
    if not isinstance(params, list):
        raise YoctoMalformedForm(f"lambda parameter list must be a list, got {params!r}")

    return Function(_parse_params(params, "lambda"), body, env)


def defn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(defn (name params...) body...)

    Builds a Function closing over the environment the defn is evaluated in,
    binds it under `name` in that environment and returns it.
    """
    if len(tail) < 2:
        raise YoctoArityError("defn requires a signature and at least one body form")

    signature, *body = tail
    if not isinstance(signature, list) or not signature:
        raise YoctoMalformedForm(
            "first argument to defn must be a list containing at least the function name"
        )
    name, *params = signature
    if not isinstance(name, Symbol):
        raise YoctoMalformedForm(f"function name must be a name, got {name!r}")

    fn = Function(_parse_params(params, f"defn {name}"), body, env, name=name)
    env.define(name, fn)
    logger.debug("defn %s (%d params)", name, len(params))
    return fn
