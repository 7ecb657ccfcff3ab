"""Binding builtins and registration of the whole builtin library.

`def` binds in the global scope whatever the lexical depth of the call, `=`
binds in the current scope only, and `\\` builds a Lambda with a fresh,
empty closure environment.
"""
from __future__ import annotations

from lispy.builtin import list_builtin as lists
from lispy.builtin import math_builtin as maths
from lispy.builtin.contracts import check_count, check_type
from lispy.types.environment import Environment
from lispy.types.value import Builtin, BuiltinFn, Error, ErrorKind, Lambda, QExpr, SExpr, Symbol, Value, type_name


def _check_symbols(func: str, syms: QExpr) -> Error | None:
    for cell in syms:
        if not isinstance(cell, Symbol):
            return Error(
                f"Function '{func}' cannot define non-symbol. Got {type_name(cell)}, expected Symbol.",
                ErrorKind.TYPE_MISMATCH,
            )
    return None


def _bind_vars(env: Environment, args: SExpr, func: str) -> Value:
    """Shared body of `def` and `=`: ({sym ...} value ...)."""
    if not len(args):
        return Error(
            f"Function '{func}' passed incorrect number of arguments. Got 0, expected at least 1.",
            ErrorKind.ARITY_MISMATCH,
        )
    if (err := check_type(func, args, 0, QExpr)) is not None:
        return err

    syms = args.pop(0)
    if (err := _check_symbols(func, syms)) is not None:
        return err
    if len(syms) != len(args):
        return Error(
            f"Function '{func}' passed incorrect number of values for symbols. Got {len(args)}, expected {len(syms)}.",
            ErrorKind.ARITY_MISMATCH,
        )

    bind_fn = env.define_global if func == "def" else env.bind
    for sym, value in zip(syms, args):
        bind_fn(sym.name, value)
    return SExpr()


def define(env: Environment, args: SExpr) -> Value:
    """(def {a b} 1 2) binds a and b in the global scope."""
    return _bind_vars(env, args, "def")


def put(env: Environment, args: SExpr) -> Value:
    """(= {a b} 1 2) binds a and b in the current scope."""
    return _bind_vars(env, args, "=")


def lambda_builtin(env: Environment, args: SExpr) -> Value:
    """(\\ {formals} {body}) => Lambda"""
    if (err := check_count("\\", args, 2)) is not None:
        return err
    if (err := check_type("\\", args, 0, QExpr)) is not None:
        return err
    if (err := check_type("\\", args, 1, QExpr)) is not None:
        return err

    formals = args.pop(0)
    if (err := _check_symbols("\\", formals)) is not None:
        return err
    body = args.pop(0)
    return Lambda(formals, body, Environment())


BUILTINS: dict[str, BuiltinFn] = {
    # Variable functions
    "\\": lambda_builtin,
    "def": define,
    "=": put,
    # List functions
    "list": lists.list_builtin,
    "head": lists.head,
    "tail": lists.tail,
    "eval": lists.eval_builtin,
    "join": lists.join,
    # Operators
    "+": maths.add,
    "-": maths.sub,
    "*": maths.mul,
    "/": maths.div,
    "%": maths.mod,
    "^": maths.power,
    "min": maths.minimum,
    "max": maths.maximum,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    for name, fn in BUILTINS.items():
        env.bind(name, Builtin(name, fn))
