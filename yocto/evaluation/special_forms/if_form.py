from yocto import EvaluatorFn
from yocto import SExpression, LispValue
from yocto.errors import YoctoArityError
from yocto.types.nil import Nil
from yocto.types.environment import Environment
from yocto.evaluation.special_forms.logic_forms import is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise YoctoArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)

    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
