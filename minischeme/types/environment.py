"""Runtime environment for minischeme.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. A scope only ever points at its parent, so
the chain is acyclic by construction.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minischeme import LispValue
from minischeme.errors import SchemeNameError
from minischeme.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "_outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self._outer = outer

    @property
    def outer(self) -> Optional[Environment]:
        return self._outer

    def child(self) -> Environment:
        """Create a new innermost scope whose parent is this one."""
        return Environment(self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only, never in a parent."""
        if not isinstance(name, Symbol):
            raise TypeError(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env._outer
        return None

    def get(self, name: Symbol) -> Optional[LispValue]:
        """Value bound to `name` in the nearest enclosing scope, or None."""
        if name in self.vars:
            return self.vars[name]
        if self._outer is not None:
            return self._outer.get(name)
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Like `get`, but raise SchemeNameError when `name` is not bound."""
        env = self.find(name)
        if env is None:
            raise SchemeNameError("symbol is not defined.")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self._outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env._outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
