"""Runtime environment for Lispy.

The Environment stores bindings of Symbols to values and supports nested
scopes via an `outer` link. Values go in and come out as copies, so nothing
handed to a caller aliases the environment's own storage. The one thing that
is shared is the Environment object itself: a Lambda keeps a reference to the
scope it captured for as long as the Lambda lives.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any, Optional

from lispy.errors import ErrorKind, LispyInvalidSymbol
from lispy.types.error import Error
from lispy.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Any] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: Any) -> None:
        """Bind `name` to a copy of `value` in this frame.

        An existing binding of the same name in this frame is replaced; outer
        frames are untouched, so the new binding shadows them.

        Raises LispyInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value.copy()

    def define_global(self, name: Symbol, value: Any) -> None:
        """Bind `name` in the root of this environment's chain."""
        root = self.root()
        logger.debug("def %s in root %#x", name, id(root))
        root.define(name, value)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Any:
        """Return a copy of the value bound to `name`, or an unbound-symbol Error."""
        env = self.find(name)
        if env is None:
            return Error(f"Unbound symbol '{name}'", ErrorKind.UNBOUND_SYMBOL)
        return env.vars[name].copy()

    def child(self) -> Environment:
        """Return a new empty scope whose parent is this one."""
        return Environment(outer=self)

    def clone(self) -> Environment:
        """Copy this frame's bindings into a new frame with the same parent."""
        env = Environment(outer=self.outer)
        env.vars = {k: v.copy() for k, v in self.vars.items()}
        return env

    def update(self, mapping: dict[Symbol, Any]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
