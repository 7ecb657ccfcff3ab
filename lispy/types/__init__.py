from lispy.types.value import (
    INT64_MAX, INT64_MIN, Builtin, Error, ErrorKind, Function, Lambda, Number, QExpr, SExpr, String, Symbol, Value,
    render, type_name, wrap_int64,
)
from lispy.types.environment import Environment
