from yocto import EvaluatorFn
from yocto import SExpression, LispValue
from yocto.errors import YoctoArityError
from yocto.types.environment import Environment
from yocto.types.symbol import Symbol

QUOTING_HEADS = (Symbol("quote"), Symbol("quasiquote"))


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(eval x)

    A (quote y) or (quasiquote y) argument is unwrapped to y first; the
    result is then evaluated in the current environment. The argument is not
    evaluated beforehand.
    """
    if len(tail) != 1:
        raise YoctoArityError("eval expects exactly one argument")
    expr_to_eval = tail[0]
    if isinstance(expr_to_eval, list) and expr_to_eval and expr_to_eval[0] in QUOTING_HEADS:
        if len(expr_to_eval) != 2:
            raise YoctoArityError(f"{expr_to_eval[0]} expects exactly one argument")
        expr_to_eval = expr_to_eval[1]
    return evaluate_fn(expr_to_eval, env)
