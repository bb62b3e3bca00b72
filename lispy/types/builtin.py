from __future__ import annotations

from typing import Any, Callable

# Native operation signature: (calling environment, evaluated arguments) -> value
NativeFn = Callable[[Any, Any], Any]


class Builtin:
    """A primitive operation implemented in Python."""

    __slots__ = ("name", "fn")

    TYPE_NAME = "Function"

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, env, args):
        return self.fn(env, args)

    def copy(self) -> Builtin:
        return Builtin(self.name, self.fn)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.fn is other.fn

    def __hash__(self) -> int:
        return id(self.fn)

    def __repr__(self):
        return f"Builtin({self.name!r})"

    def __str__(self):
        return "<builtin>"
