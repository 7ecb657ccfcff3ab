"""Core evaluator for the Lispy interpreter.

Plain recursive reduction: symbols are looked up, S-expressions are reduced
and applied, everything else is already in normal form. Recursion depth
follows expression nesting depth and no tail calls are eliminated, so very
deep input is bounded by the Python recursion limit.
"""

from __future__ import annotations

from lispy.evaluation.apply import apply
from lispy.types.environment import Environment
from lispy.types.value import Builtin, Error, ErrorKind, Lambda, SExpr, Symbol, Value, type_name


def evaluate(env: Environment, value: Value) -> Value:
    """Reduce `value` to a terminal value in `env`."""
    match value:
        case Symbol(name=name):
            return env.lookup(name)
        case SExpr():
            return evaluate_sexpr(env, value)
    # --- Atoms, Q-expressions and functions return as-is ---
    return value


def evaluate_sexpr(env: Environment, seq: SExpr) -> Value:
    """Evaluate every cell left to right, then apply the head to the rest.

    All cells are reduced before any error is reported, so side effects of
    later cells still happen; the first error in left-to-right order wins.
    """
    cells = seq.cells
    for i, cell in enumerate(cells):
        cells[i] = evaluate(env, cell)

    for cell in cells:
        if isinstance(cell, Error):
            return cell

    if not cells:
        return seq
    if len(cells) == 1:
        return seq.take(0)

    head = seq.pop(0)
    if not isinstance(head, (Builtin, Lambda)):
        return Error(
            f"S-Expression starts with incorrect type. Got {type_name(head)}, expected Function.",
            ErrorKind.INVALID_HEAD,
        )
    return apply(head, seq, env, evaluate)
