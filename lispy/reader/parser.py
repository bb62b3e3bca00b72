"""
  Lispy Lexer and Parser

Turns source text into the tagged syntax tree consumed by
`lispy.evaluation.read`. The tree follows the grammar

    number : /-?[0-9]+/ ;
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&%]+/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    lispy  : /^/ <expr>* /$/ ;

and keeps the matched brackets and the start/end anchors as child nodes, so
readers must skip them (see `expression_nodes`).

- Comments run from ';' to the end of the line.
- A run of symbol characters that is entirely `-?[0-9]+` is a number, any
  other run is a symbol.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from lispy.errors import LispySyntaxError
from lispy.reader.ast import AstNode


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&%]+)"  # symbols and numbers
    r")",
)

NUMBER_RE = re.compile(r"-?[0-9]+")

# opening token type -> (opening bracket, closing bracket, closing token type, rule name)
_LISTS = {
    "lparen": ("(", ")", "rparen", "sexpr"),
    "lbrace": ("{", "}", "rbrace", "qexpr"),
}

Token = tuple[str, str, int]


def position(source: str, pos: int) -> tuple[int, int]:
    """1-based (line, column) of offset `pos` in `source`."""
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        match = TOKEN_RE.match(source, pos)
        if not match:
            # only whitespace (or nothing lexable) remains
            rest = source[pos:]
            if rest.isspace():
                return
            bad = pos + len(rest) - len(rest.lstrip())
            line, column = position(source, bad)
            raise LispySyntaxError(f"unexpected character {source[bad]!r}", line, column)

        pos = match.end()
        if match.group("comment"):
            continue
        for name in ("lparen", "rparen", "lbrace", "rbrace", "symbol"):
            text = match.group(name)
            if text:
                yield name, text, match.start(name)
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[Token], source: str = ""):
        self.tokens = iter(token_iter)
        self.source = source
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def _position(self, offset: int) -> tuple[int, int]:
        return position(self.source, offset)

    def _error(self, message: str, offset: int) -> LispySyntaxError:
        line, column = self._position(offset)
        return LispySyntaxError(message, line, column)

    def parse_expr(self) -> Optional[AstNode]:
        token = self.peek()
        if token is None:
            return None
        tok_type, tok_val, offset = token
        line, column = self._position(offset)

        if tok_type == "symbol":
            self.advance()
            rule = "number" if NUMBER_RE.fullmatch(tok_val) else "symbol"
            return AstNode(f"expr|{rule}|regex", tok_val, line=line, column=column)

        if tok_type in _LISTS:
            open_char, close_char, close_type, rule = _LISTS[tok_type]
            self.advance()
            children = [AstNode("char", open_char, line=line, column=column)]
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise self._error(f"expected '{close_char}' at end of input", len(self.source))
                if nxt[0] == close_type:
                    self.advance()
                    close_line, close_column = self._position(nxt[2])
                    children.append(AstNode("char", close_char, line=close_line, column=close_column))
                    break
                if nxt[0] in ("rparen", "rbrace"):
                    raise self._error(f"unexpected '{nxt[1]}', expected '{close_char}'", nxt[2])
                children.append(self.parse_expr())
            return AstNode(f"expr|{rule}|>", children=tuple(children), line=line, column=column)

        raise self._error(f"unexpected '{tok_val}'", offset)

    def parse_all(self) -> Iterator[AstNode]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> AstNode:
    """Parse a whole input into a root node tagged '>'."""
    stream = TokenStream(lex(source), source)
    expressions = list(stream.parse_all())
    end_line, end_column = position(source, len(source))
    return AstNode(
        ">",
        children=(
            AstNode("regex", line=1, column=1),
            *expressions,
            AstNode("regex", line=end_line, column=end_column),
        ),
    )
