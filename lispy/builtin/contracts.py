"""Argument checks shared by the builtin library.

Each check returns None when the contract holds, or the `Error` value the
builtin should hand back to its caller:

    if (err := check_count("head", args, 1)) is not None:
        return err
"""
from __future__ import annotations

from lispy.types.value import Error, ErrorKind, SExpr, type_name


def check_count(func: str, args: SExpr, expected: int) -> Error | None:
    got = len(args)
    if got == expected:
        return None
    return Error(
        f"Function '{func}' passed incorrect number of arguments. Got {got}, expected {expected}.",
        ErrorKind.ARITY_MISMATCH,
    )


def check_min_count(func: str, args: SExpr, minimum: int) -> Error | None:
    got = len(args)
    if got >= minimum:
        return None
    return Error(
        f"Function '{func}' passed incorrect number of arguments. Got {got}, expected at least {minimum}.",
        ErrorKind.ARITY_MISMATCH,
    )


def check_type(func: str, args: SExpr, idx: int, expected: type) -> Error | None:
    arg = args[idx]
    if isinstance(arg, expected):
        return None
    return Error(
        f"Function '{func}' passed incorrect type for argument {idx}. "
        f"Got {type_name(arg)}, expected {expected.TYPE_NAME}.",
        ErrorKind.TYPE_MISMATCH,
    )


def check_all_types(func: str, args: SExpr, expected: type) -> Error | None:
    for i in range(len(args)):
        if (err := check_type(func, args, i, expected)) is not None:
            return err
    return None


def check_not_empty(func: str, args: SExpr, idx: int) -> Error | None:
    if len(args[idx]):
        return None
    return Error(f"Function '{func}' passed {{}} for argument {idx}.", ErrorKind.EMPTY_ARGUMENT)
