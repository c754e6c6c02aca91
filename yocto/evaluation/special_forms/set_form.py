from yocto import EvaluatorFn
from yocto import SExpression, LispValue
from yocto.errors import YoctoInvalidSymbol, YoctoArityError
from yocto.types.symbol import Symbol
from yocto.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! name value)
    Rebinds the nearest enclosing binding of `name`; never creates one.
    """
    if len(tail) != 2:
        raise YoctoArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise YoctoInvalidSymbol(f"set! first argument must be a name, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return value
