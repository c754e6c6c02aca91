from yocto import EvaluatorFn
from yocto import SExpression, LispValue
from yocto.types.environment import Environment
from yocto.types.nil import Nil


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
