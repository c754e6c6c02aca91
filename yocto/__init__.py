# Core type aliases for Yocto's data model.
# Plain Python values stand for both code (forms) and runtime values:
# float for numbers, str for strings, bool for booleans and list for lists.
# Names are Symbol instances; the absence of a value is the Nil singleton.
#
# Naming guidance:
# - SExpression: use in reader/macro code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type: evaluate(expr, env) -> value, handed to special forms
EvaluatorFn = Callable[..., LispValue]

# Builtin calling convention: fn(env, args) -> value
BuiltinFn = Callable[..., LispValue]

__version__ = "0.3.0"
