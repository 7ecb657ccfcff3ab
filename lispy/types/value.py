"""The Lispy value model.

Every datum the runtime touches is one of a closed set of variants:

    Number | Error | Symbol | String | SExpr | QExpr | Builtin | Lambda

Atoms (numbers, errors, symbols, strings, builtins) are immutable and may be
shared freely. Containers (`SExpr`, `QExpr`) own their cells outright and are
mutated in place by the evaluator through `append`, `pop` and `take`; copying
a container copies every cell. A `Lambda` owns its closure environment, so
copying a lambda copies that environment as well.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, ClassVar

if TYPE_CHECKING:
    from lispy.types.environment import Environment


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def wrap_int64(n: int) -> int:
    """Reduce an arbitrary Python int to a signed 64-bit two's-complement value."""
    return ((n - INT64_MIN) & 0xFFFF_FFFF_FFFF_FFFF) + INT64_MIN


class ErrorKind(Enum):
    DIVISION_BY_ZERO = "division-by-zero"
    UNBOUND_SYMBOL = "unbound-symbol"
    INVALID_HEAD = "invalid-head"
    ARITY_MISMATCH = "arity-mismatch"
    TOO_MANY_ARGUMENTS = "too-many-arguments"
    TYPE_MISMATCH = "type-mismatch"
    EMPTY_ARGUMENT = "empty-argument"
    INVALID_NUMBER = "invalid-number"
    SYNTAX = "syntax"
    GENERIC = "generic"


# -------------------------------
# Atoms
# -------------------------------
@dataclass(frozen=True, slots=True)
class Number:
    value: int

    TYPE_NAME: ClassVar[str] = "Number"

    def copy(self) -> Number:
        return self

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Error:
    message: str
    kind: ErrorKind = ErrorKind.GENERIC

    TYPE_NAME: ClassVar[str] = "Error"

    def __post_init__(self):
        if not self.message:
            raise ValueError("Error values require a non-empty message")

    def copy(self) -> Error:
        return self

    def __str__(self) -> str:
        return f"ERROR: {self.message}"


@dataclass(frozen=True, slots=True)
class Symbol:
    name: str

    TYPE_NAME: ClassVar[str] = "Symbol"

    def copy(self) -> Symbol:
        return self

    def __str__(self) -> str:
        return self.name


_STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


@dataclass(frozen=True, slots=True)
class String:
    text: str

    TYPE_NAME: ClassVar[str] = "String"

    def copy(self) -> String:
        return self

    def __str__(self) -> str:
        return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in self.text) + '"'


# -------------------------------
# Containers
# -------------------------------
@dataclass(slots=True)
class _Expr:
    """Shared behaviour of S- and Q-expressions: an owned, ordered list of cells."""

    cells: list[Value] = field(default_factory=list)

    OPEN: ClassVar[str] = "("
    CLOSE: ClassVar[str] = ")"

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, idx: int) -> Value:
        return self.cells[idx]

    def append(self, value: Value):
        """Add `value` to the end and return self, so reads can chain appends."""
        self.cells.append(value)
        return self

    def extend(self, other: _Expr):
        """Move every cell of `other` onto the end of this container."""
        self.cells.extend(other.cells)
        other.cells = []
        return self

    def pop(self, idx: int = 0) -> Value:
        """Remove and return the cell at `idx`; the remaining cells keep their order."""
        return self.cells.pop(idx)

    def take(self, idx: int = 0) -> Value:
        """Pop the cell at `idx` and discard the rest of the container."""
        value = self.cells.pop(idx)
        self.cells.clear()
        return value

    def __str__(self) -> str:
        return self.OPEN + " ".join(str(c) for c in self.cells) + self.CLOSE


@dataclass(slots=True)
class SExpr(_Expr):
    TYPE_NAME: ClassVar[str] = "S-Expression"

    def copy(self) -> SExpr:
        return SExpr([c.copy() for c in self.cells])

    def quoted(self) -> QExpr:
        """Re-tag as a Q-expression; the cells move to the result."""
        q = QExpr(self.cells)
        self.cells = []
        return q


@dataclass(slots=True)
class QExpr(_Expr):
    TYPE_NAME: ClassVar[str] = "Q-Expression"
    OPEN: ClassVar[str] = "{"
    CLOSE: ClassVar[str] = "}"

    def copy(self) -> QExpr:
        return QExpr([c.copy() for c in self.cells])

    def unquoted(self) -> SExpr:
        """Re-tag as an S-expression; the cells move to the result."""
        s = SExpr(self.cells)
        self.cells = []
        return s


# -------------------------------
# Functions
# -------------------------------
BuiltinFn = Callable[["Environment", SExpr], "Value"]


@dataclass(frozen=True, eq=False, slots=True)
class Builtin:
    """A native operation. Builtins compare by identity."""

    name: str
    fn: BuiltinFn

    TYPE_NAME: ClassVar[str] = "Function"

    def copy(self) -> Builtin:
        return self

    def __str__(self) -> str:
        return "<builtin>"


@dataclass(eq=False, slots=True)
class Lambda:
    """A user-defined function: formal symbols, a quoted body and an owned closure."""

    formals: QExpr
    body: QExpr
    closure: Environment

    TYPE_NAME: ClassVar[str] = "Function"

    def copy(self) -> Lambda:
        return Lambda(self.formals.copy(), self.body.copy(), self.closure.copy())

    def __str__(self) -> str:
        return f"(\\ {self.formals} {self.body})"


Value = Number | Error | Symbol | String | SExpr | QExpr | Builtin | Lambda
Function = Builtin | Lambda


def type_name(value: Value) -> str:
    return value.TYPE_NAME


def render(value: Value) -> str:
    """Human-readable rendering used by the REPL."""
    return str(value)
