from yocto import EvaluatorFn
from yocto import SExpression, LispValue
from yocto.errors import YoctoArityError, YoctoInvalidSymbol
from yocto.types.environment import Environment
from yocto.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the current frame only, so an inner def shadows an outer one.
    Returns the bound value.
    """
    if len(tail) != 2:
        raise YoctoArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise YoctoInvalidSymbol(f"first argument to def must be a name, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
