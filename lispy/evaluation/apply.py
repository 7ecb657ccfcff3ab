"""Application engine for Lispy.

This module centralizes function application semantics for the evaluator:
- Builtins are handed the caller's environment and the argument container and
  do their own arity and type checking.
- Lambdas support partial application: supplying fewer arguments than formals
  returns a new Lambda awaiting the rest.
- A saturated Lambda runs its body in a fresh call frame seeded from its
  closure and linked to the caller's environment. The stored closure is never
  mutated by a call, so a lambda can be invoked any number of times.
"""

from lispy import EvaluatorFn
from lispy.types.environment import Environment
from lispy.types.value import Builtin, Error, ErrorKind, Lambda, QExpr, SExpr, Value


def _bind_formals(target: Environment, formals: QExpr, args: SExpr) -> None:
    """Pop formals and arguments pairwise, binding each argument into `target`."""
    while len(args):
        sym = formals.pop(0)
        target.bind(sym.name, args.pop(0))


def apply_lambda(
    fn: Lambda,
    args: SExpr,
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply a Lisp Lambda value.

    Parameters:
    - fn: The Lambda being applied. It is left unchanged.
    - args: The already-evaluated argument values; consumed by the call.
    - caller_env: The environment the call originates from. Free variables of
      the body that the closure does not bind resolve through it.
    - evaluate_fn: Evaluator used for the body of a saturated call.

    Behavior:
    - More arguments than formals is a TooManyArguments error.
    - Fewer arguments returns a copy of `fn` with the supplied arguments bound
      in its (copied) closure and its formals truncated to the remainder.
    - Otherwise the body is evaluated and its value returned.
    """
    given = len(args)
    total = len(fn.formals)
    if given > total:
        return Error(
            f"Function passed too many arguments. Got {given}, expected {total}.",
            ErrorKind.TOO_MANY_ARGUMENTS,
        )

    if given < total:
        partial = fn.copy()
        _bind_formals(partial.closure, partial.formals, args)
        return partial

    frame = fn.closure.frame(caller_env)
    _bind_formals(frame, fn.formals.copy(), args)
    return evaluate_fn(frame, fn.body.copy().unquoted())


def apply(
    fn: Builtin | Lambda,
    args: SExpr,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply either a Builtin or a Lambda to an argument container."""
    if isinstance(fn, Builtin):
        return fn.fn(env, args)
    return apply_lambda(fn, args, env, evaluate_fn)
