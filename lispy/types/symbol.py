from __future__ import annotations
import sys


class Symbol:
    """A name looked up in the environment when evaluated."""

    __slots__ = ("name",)

    TYPE_NAME = "Symbol"

    def __init__(self, name: str):
        # Interned so lookups hash and compare on the same string object
        self.name = sys.intern(name)

    def copy(self) -> Symbol:
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


# Formal parameter that collects all remaining arguments into one Q-expression.
VARIADIC = Symbol("&")
