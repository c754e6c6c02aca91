from yocto import EvaluatorFn
from yocto import SExpression, LispValue
from yocto.errors import YoctoArityError
from yocto.types.environment import Environment
from yocto.evaluation.quasiquote import expand_template, splice_value


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise YoctoArityError("quote requires exactly one argument")
    return tail[0]


def quasiquote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise YoctoArityError("quasiquote requires exactly one argument")
    # A top-level `,@x` template yields a splice marker, which the enclosing
    # call flattens into its argument list.
    return expand_template(tail[0], env, 0, evaluate_fn)


def unquote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    # Reached when a macro expansion still carries (unquote x): evaluate x.
    if len(tail) != 1:
        raise YoctoArityError("unquote requires exactly one argument")
    return evaluate_fn(tail[0], env)


def unquote_splice_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise YoctoArityError("unquote-splicing requires exactly one argument")
    return splice_value(evaluate_fn(tail[0], env))
