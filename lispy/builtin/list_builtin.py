"""Q-expression builtins: list, head, tail, eval, join."""
from __future__ import annotations

from lispy.builtin.contracts import check_all_types, check_count, check_not_empty, check_type
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.value import QExpr, SExpr, Value


def list_builtin(env: Environment, args: SExpr) -> Value:
    """Return the (already evaluated) arguments as a Q-expression."""
    return args.quoted()


def head(env: Environment, args: SExpr) -> Value:
    """(head {a b c}) => {a}"""
    if (err := check_count("head", args, 1)) is not None:
        return err
    if (err := check_type("head", args, 0, QExpr)) is not None:
        return err
    if (err := check_not_empty("head", args, 0)) is not None:
        return err

    q = args.take(0)
    del q.cells[1:]
    return q


def tail(env: Environment, args: SExpr) -> Value:
    """(tail {a b c}) => {b c}"""
    if (err := check_count("tail", args, 1)) is not None:
        return err
    if (err := check_type("tail", args, 0, QExpr)) is not None:
        return err
    if (err := check_not_empty("tail", args, 0)) is not None:
        return err

    q = args.take(0)
    q.pop(0)
    return q


def eval_builtin(env: Environment, args: SExpr) -> Value:
    """Evaluate a Q-expression as if it were an S-expression, in the caller's scope."""
    if (err := check_count("eval", args, 1)) is not None:
        return err
    if (err := check_type("eval", args, 0, QExpr)) is not None:
        return err

    return evaluate(env, args.take(0).unquoted())


def join(env: Environment, args: SExpr) -> Value:
    """Concatenate Q-expressions left to right."""
    if (err := check_all_types("join", args, QExpr)) is not None:
        return err

    result = QExpr()
    while len(args):
        result.extend(args.pop(0))
    return result
