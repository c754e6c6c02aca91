"""Built-in functions for the Yocto runtime environment.

This module defines arithmetic, comparison, equality, list helpers and
`print`, plus `register(env)` which installs them (and the boolean names)
into a root environment.

Every builtin follows the calling convention fn(env, args): `args` is the
already-evaluated, splice-flattened argument list and `env` the caller's
environment.
"""
from __future__ import annotations

import math
import sys
from typing import Any

from yocto import LispValue
from yocto.errors import YoctoArityError, YoctoArithmeticError, YoctoTypeError
from yocto.printer import to_lisp_string
from yocto.types.environment import Environment
from yocto.types.nil import Nil
from yocto.types.symbol import Symbol


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _numbers(op: str, args: list[LispValue]) -> list[float]:
    for arg in args:
        if not _is_number(arg):
            raise YoctoTypeError(f"unsupported operand for {op}: {to_lisp_string(arg)}")
    return [float(a) for a in args]


def _expect_arity(op: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise YoctoArityError(f"{op} expects exactly {n} arguments, got {len(args)}")


def _expect_at_least(op: str, args: list[LispValue], n: int) -> None:
    if len(args) < n:
        raise YoctoArityError(f"{op} expects at least {n} argument(s), got {len(args)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> float:
    return sum(_numbers("+", args), 0.0)


def sub(env: Environment, args: list[LispValue]) -> float:
    _expect_at_least("-", args, 1)
    first, *rest = _numbers("-", args)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(env: Environment, args: list[LispValue]) -> float:
    result = 1.0
    for x in _numbers("*", args):
        result *= x
    return result


def div(env: Environment, args: list[LispValue]) -> float:
    _expect_at_least("/", args, 1)
    first, *rest = _numbers("/", args)
    if not rest:
        rest, first = [first], 1.0
    for x in rest:
        if x == 0:
            raise YoctoArithmeticError("division by zero")
        first /= x
    return first


def power(env: Environment, args: list[LispValue]) -> float:
    _expect_arity("**", args, 2)
    base, exponent = _numbers("**", args)
    try:
        return math.pow(base, exponent)
    except (ValueError, OverflowError) as ex:
        raise YoctoArithmeticError(f"** failed for {to_lisp_string(base)} and {to_lisp_string(exponent)}: {ex}")


def modulo(env: Environment, args: list[LispValue]) -> float:
    """Remainder of the integer parts; the sign follows the dividend."""
    _expect_arity("%", args, 2)
    nums = _numbers("%", args)
    if not all(math.isfinite(x) for x in nums):
        raise YoctoArithmeticError(
            f"% needs finite operands, got {to_lisp_string(nums[0])} and {to_lisp_string(nums[1])}"
        )
    a, b = (int(x) for x in nums)
    if b == 0:
        raise YoctoArithmeticError("modulo by zero")
    return float(math.fmod(a, b))


# -------------------------------
# Comparison and equality
# -------------------------------
def _comparison(op: str, name: str, test):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        _expect_at_least(op, args, 1)
        nums = _numbers(op, args)
        return all(test(a, b) for a, b in zip(nums, nums[1:]))
    compare.__name__ = name
    return compare


lt = _comparison("<", "lt", lambda a, b: a < b)
lte = _comparison("<=", "lte", lambda a, b: a <= b)
gt = _comparison(">", "gt", lambda a, b: a > b)
gte = _comparison(">=", "gte", lambda a, b: a >= b)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Lisp values, element-wise for lists.

    Booleans never equal numbers, even though Python treats True == 1.
    """
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


def equals(env: Environment, args: list[LispValue]) -> bool:
    """True if all arguments are equal (or zero/one arg)."""
    return all(is_equal(args[0], other) for other in args[1:])


def not_equals(env: Environment, args: list[LispValue]) -> bool:
    return not equals(env, args)


def logical_not(env: Environment, args: list[LispValue]) -> bool:
    _expect_arity("not", args, 1)
    value = args[0]
    return value is Nil or value is False


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    return list(args)


def cons(env: Environment, args: list[LispValue]) -> list[LispValue]:
    _expect_arity("cons", args, 2)
    head, tail = args
    if tail is Nil:
        return [head]
    if not isinstance(tail, list):
        raise YoctoTypeError("Second argument to cons must be a list or nil")
    return [head, *tail]


def _sequence(op: str, args: list[LispValue]) -> list[LispValue]:
    _expect_arity(op, args, 1)
    if args[0] is Nil:
        return []
    if not isinstance(args[0], list):
        raise YoctoTypeError(f"{op} expects a list, got {to_lisp_string(args[0])}")
    return args[0]


def car(env: Environment, args: list[LispValue]) -> LispValue:
    seq = _sequence("car", args)
    return seq[0] if seq else Nil


def cdr(env: Environment, args: list[LispValue]) -> list[LispValue]:
    return list(_sequence("cdr", args)[1:])


# -------------------------------
# Output
# -------------------------------
def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    print(" ".join(to_lisp_string(a, display=True) for a in args), file=sys.stdout)
    return Nil


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    Symbol('+'): add,
    Symbol('-'): sub,
    Symbol('*'): mul,
    Symbol('/'): div,
    Symbol('**'): power,
    Symbol('%'): modulo,
    Symbol('='): equals,
    Symbol('!='): not_equals,
    Symbol('<'): lt,
    Symbol('<='): lte,
    Symbol('>'): gt,
    Symbol('>='): gte,
    Symbol('not'): logical_not,
    Symbol('list'): list_builtin,
    Symbol('cons'): cons,
    Symbol('car'): car,
    Symbol('cdr'): cdr,
    Symbol('print'): print_builtin,
}


def register(env: Environment) -> None:
    env.update(BUILTINS)
    env.update({
        Symbol('true'): True,
        Symbol('false'): False,
    })
