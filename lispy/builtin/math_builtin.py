"""Arithmetic builtins.

All operators take Number arguments only and fold left to right starting
from the first argument. Results are kept in signed 64-bit range.
"""
from __future__ import annotations

from typing import Callable

from lispy.builtin.contracts import check_all_types, check_min_count
from lispy.types.environment import Environment
from lispy.types.value import Error, ErrorKind, Number, SExpr, Value, wrap_int64


def _division_by_zero() -> Error:
    return Error("Division by zero", ErrorKind.DIVISION_BY_ZERO)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _div(a: int, b: int) -> int | Error:
    if b == 0:
        return _division_by_zero()
    return _trunc_div(a, b)


def _mod(a: int, b: int) -> int | Error:
    # Remainder takes the sign of the dividend
    if b == 0:
        return _division_by_zero()
    return a - b * _trunc_div(a, b)


def _pow(a: int, b: int) -> int | Error:
    if b >= 0:
        return pow(a, b, 1 << 64)
    if a == 0:
        return _division_by_zero()
    if a == 1:
        return 1
    if a == -1:
        return 1 if b % 2 == 0 else -1
    return 0


OPERATORS: dict[str, Callable[[int, int], int | Error]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _div,
    "%": _mod,
    "^": _pow,
    "min": min,
    "max": max,
}


def fold(op: str, args: SExpr) -> Value:
    """Left fold `op` over Number arguments; unary `-` negates."""
    if (err := check_min_count(op, args, 1)) is not None:
        return err
    if (err := check_all_types(op, args, Number)) is not None:
        return err

    acc = args.pop(0).value
    if op == "-" and not len(args):
        return Number(wrap_int64(-acc))

    fn = OPERATORS[op]
    while len(args):
        result = fn(acc, args.pop(0).value)
        if isinstance(result, Error):
            return result
        acc = wrap_int64(result)
    return Number(acc)


def add(env: Environment, args: SExpr) -> Value:
    """Sum of all arguments."""
    return fold("+", args)


def sub(env: Environment, args: SExpr) -> Value:
    """Subtract subsequent arguments from the first; one argument is negated."""
    return fold("-", args)


def mul(env: Environment, args: SExpr) -> Value:
    """Product of all arguments."""
    return fold("*", args)


def div(env: Environment, args: SExpr) -> Value:
    """Divide left to right, truncating toward zero."""
    return fold("/", args)


def mod(env: Environment, args: SExpr) -> Value:
    return fold("%", args)


def power(env: Environment, args: SExpr) -> Value:
    """(^ a b c) => (a^b)^c"""
    return fold("^", args)


def minimum(env: Environment, args: SExpr) -> Value:
    return fold("min", args)


def maximum(env: Environment, args: SExpr) -> Value:
    return fold("max", args)
