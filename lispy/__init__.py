# Core type aliases and public API for Lispy.
#
# Runtime data is the closed set of variants in lispy.types.value
# (Number, Error, Symbol, String, SExpr, QExpr, Builtin, Lambda). The two entry
# points used by the shell and file loader are `evaluate(env, value)` and
# `render(value)`; `Interpreter` bundles a global environment with the reader.

from typing import Callable

__version__ = "0.0.2"

# Evaluator function type, handed to the application engine
EvaluatorFn = Callable[["Environment", "Value"], "Value"]

from lispy.errors import LispyError, LispySyntaxError, LispyLoadError, LispyConfigError  # noqa: E402
from lispy.types.value import (  # noqa: E402
    Value, Function, Number, Error, ErrorKind, Symbol, String, SExpr, QExpr, Builtin, Lambda, render, type_name
)
from lispy.types.environment import Environment  # noqa: E402
from lispy.evaluation.evaluator import evaluate  # noqa: E402
from lispy.builtin.env_builtin import register  # noqa: E402
from lispy.reader import read, parse  # noqa: E402
from lispy.interpreter import Interpreter  # noqa: E402


__all__ = [
    "EvaluatorFn",
    "LispyError", "LispySyntaxError", "LispyLoadError", "LispyConfigError",
    "Value", "Function", "Number", "Error", "ErrorKind", "Symbol", "String", "SExpr", "QExpr", "Builtin", "Lambda",
    "Environment", "evaluate", "render", "type_name", "register", "read", "parse", "Interpreter",
]
