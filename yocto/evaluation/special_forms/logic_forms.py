from yocto import SExpression, EvaluatorFn, LispValue
from yocto.errors import YoctoArityError
from yocto.types.environment import Environment
from yocto.types.nil import Nil


def is_truthy(val: LispValue) -> bool:
    """Everything except Nil and false is true, including 0 and ""."""
    return not (val is Nil or val is False)


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a falsey value
    (nil or false) is found, in which case false is returned immediately. If
    all operands are truthy, returns the value of the last operand. With zero
    operands, returns true.
    """
    result: LispValue = True
    for expr in tail:
        val = evaluate_fn(expr, env)
        if not is_truthy(val):
            return False
        result = val
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    truthy value. If none are truthy, or there are no operands, returns false.
    """
    for expr in tail:
        val = evaluate_fn(expr, env)
        if is_truthy(val):
            return val
    return False


def _literal_form(name: str, value: bool):
    def form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> bool:
        if tail:
            raise YoctoArityError(f"({name}) takes no arguments")
        return value
    form.__name__ = f"{name}_form"
    return form


true_form = _literal_form("true", True)
false_form = _literal_form("false", False)
