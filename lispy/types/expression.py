"""List values: S-expressions (code) and Q-expressions (data).

Both hold an ordered list of values they own exclusively. They differ only in
how the evaluator treats them and in the brackets they print with, so
converting one into the other is a relabel of the same items.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Iterable, Iterator


class Expression:
    __slots__ = ("items",)

    OPEN = "("
    CLOSE = ")"

    def __init__(self, items: Iterable[Any] = ()):
        self.items: list[Any] = list(items)

    def copy(self):
        return type(self)(item.copy() for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.items == other.items

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(self.OPEN)
            buffer.write(" ".join(str(item) for item in self.items))
            buffer.write(self.CLOSE)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.items!r})"


class SExpr(Expression):
    """Evaluable list: evaluating it applies the head to the rest."""

    __slots__ = ()

    TYPE_NAME = "S-Expression"


class QExpr(Expression):
    """Quoted list: evaluates to itself."""

    __slots__ = ()

    OPEN = "{"
    CLOSE = "}"
    TYPE_NAME = "Q-Expression"
