"""Conversion of parsed syntax nodes into runtime values."""
from __future__ import annotations

import re

from lispy.reader.parser import SyntaxNode
from lispy.types.value import INT64_MAX, INT64_MIN, Error, ErrorKind, Number, QExpr, SExpr, String, Symbol, Value


_INT64_DIGITS = len(str(INT64_MAX))


def read_number(node: SyntaxNode) -> Value:
    # Over-long literals are rejected before int() hits the digit limit
    if len(node.contents.lstrip("-").lstrip("0")) > _INT64_DIGITS:
        return Error("Invalid number", ErrorKind.INVALID_NUMBER)
    x = int(node.contents)
    if not INT64_MIN <= x <= INT64_MAX:
        return Error("Invalid number", ErrorKind.INVALID_NUMBER)
    return Number(x)


_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_UNESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}


def read_string(node: SyntaxNode) -> Value:
    """Strip the quotes and resolve backslash escapes; unknown escapes keep the escaped char."""
    body = node.contents[1:-1]
    return String(_ESCAPE_RE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(1)), body))


def read(node: SyntaxNode) -> Value:
    match node.tag:
        case "number":
            return read_number(node)
        case "symbol":
            return Symbol(node.contents)
        case "string":
            return read_string(node)
        case "qexpr":
            val = QExpr()
        case "program" | "sexpr":
            val = SExpr()
        case _:
            raise ValueError(f"Cannot read syntax node tagged {node.tag!r}")

    for child in node.children:
        if child.tag == "comment":
            continue
        val.append(read(child))
    return val
