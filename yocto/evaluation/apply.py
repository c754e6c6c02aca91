"""Application engine for Yocto.

Centralizes function application so the evaluator and builtins share one
calling convention:
- User-defined Functions run their body in a fresh child of their closure env.
- Python callables (builtins) are invoked as fn(env, args) with the caller's env.
"""

from __future__ import annotations

from yocto import BuiltinFn, EvaluatorFn, LispValue
from yocto.errors import YoctoNotCallable
from yocto.types.environment import Environment
from yocto.types.function import Function
from yocto.types.nil import Nil


def apply_function(fn: Function, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a user-defined Function to already-evaluated arguments.

    Each call gets exactly one new Environment whose parent is the function's
    defining environment. Body forms run in order; the last value is returned.
    """
    call_env = fn.extend_env(args)
    result: LispValue = Nil
    for form in fn.body:
        result = evaluate_fn(form, call_env)
    return result


def apply(
    head: Function | BuiltinFn | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Function or a Python callable.

    - For Function, defer to apply_function.
    - For Python callables (builtins), invoke with the caller env and list of args.
    - Otherwise, raise YoctoNotCallable.
    """
    if isinstance(head, Function):
        return apply_function(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise YoctoNotCallable(f"not a function: {head!r}")
