"""Runtime environment for Lispy.

An Environment stores name -> value bindings for one lexical scope and links
to at most one enclosing scope through `parent`. It never owns its parent.
Values are copied on the way in and on the way out, so evaluation can
mutate whatever it receives without disturbing a stored binding.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from lispy.types.value import Error, ErrorKind, Value


class Environment:
    """Hierarchical mapping from symbol names to Lisp values."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        # Insertion ordered; a dict gives hashed lookup per scope
        self.vars: dict[str, Value] = {}
        self.parent: Environment | None = parent

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.parent
        return None

    def lookup(self, name: str) -> Value:
        """Return a copy of the value bound to `name`.

        Resolution walks the parent chain outwards; if no scope binds the
        name the result is an `Error` value rather than an exception.
        """
        env = self.find(name)
        if env is None:
            return Error(f"Unbound symbol {name}", ErrorKind.UNBOUND_SYMBOL)
        return env.vars[name].copy()

    def bind(self, name: str, value: Value) -> None:
        """Bind `name` in this scope only, replacing any existing local binding."""
        self.vars[name] = value.copy()

    def root(self) -> Environment:
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def define_global(self, name: str, value: Value) -> None:
        """Bind `name` in the outermost scope of the chain."""
        self.root().bind(name, value)

    def copy(self) -> Environment:
        """Copy every local binding into a new scope sharing the same parent."""
        env = Environment(self.parent)
        for k, v in self.vars.items():
            env.vars[k] = v.copy()
        return env

    def frame(self, parent: Optional[Environment]) -> Environment:
        """Open a call frame seeded with this scope's bindings and linked to `parent`.

        Stored values are never mutated in place (lookup and bind both copy),
        so the frame can share them; rebinding in the frame leaves this scope
        untouched.
        """
        env = Environment(parent)
        env.vars.update(self.vars)
        return env

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.parent
        return "<Environment chain: " + " -> ".join(chain) + ">"
