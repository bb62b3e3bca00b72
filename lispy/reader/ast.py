"""Syntax tree nodes produced by the reader.

A node is classified by its `tag`, a `|`-joined list of grammar rule names
such as ``expr|number|regex`` or ``expr|qexpr|>``; the root is tagged ``>``.
Leaves carry the matched text in `contents`; branches carry `children`,
including the bracket and anchor nodes the grammar matched around them.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AstNode:
    tag: str
    contents: str = ""
    children: tuple[AstNode, ...] = field(default=())
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        lines: list[str] = []
        self._dump(lines, 0)
        return "\n".join(lines)

    def _dump(self, lines: list[str], depth: int) -> None:
        pad = "  " * depth
        if self.children:
            lines.append(f"{pad}{self.tag}")
            for child in self.children:
                child._dump(lines, depth + 1)
        else:
            lines.append(f"{pad}{self.tag}:{self.line}:{self.column} '{self.contents}'")
