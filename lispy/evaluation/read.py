"""Conversion of reader syntax trees into Lisp values."""

from __future__ import annotations

from typing import Iterator

from lispy.errors import LispySyntaxError
from lispy.reader.ast import AstNode
from lispy.types import LispValue, QExpr, SExpr, Symbol, read_number

# Bracket tokens the grammar keeps in the tree; they carry no value.
_DELIMITERS = frozenset({"(", ")", "{", "}"})


def expression_nodes(node: AstNode) -> Iterator[AstNode]:
    """Yield the children of `node` that stand for values."""
    for child in node.children:
        if child.contents in _DELIMITERS or child.tag == "regex":
            continue
        yield child


def read(node: AstNode) -> LispValue:
    """Build the value tree for `node`.

    The root and S-expression nodes become SExpr, Q-expression nodes QExpr.
    A numeric literal that does not fit a signed 64-bit integer reads as an
    Error value, which the evaluator then propagates like any other.
    """
    if "number" in node.tag:
        return read_number(node.contents)
    if "symbol" in node.tag:
        return Symbol(node.contents)

    if node.tag == ">" or "sexpr" in node.tag:
        container = SExpr
    elif "qexpr" in node.tag:
        container = QExpr
    else:
        raise LispySyntaxError(f"Cannot read syntax node tagged {node.tag!r}", node.line, node.column)

    return container(read(child) for child in expression_nodes(node))
