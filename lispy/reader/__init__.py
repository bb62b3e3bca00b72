from lispy.reader.ast import AstNode
from lispy.reader.parser import lex, parse, TokenStream

__all__ = ["AstNode", "lex", "parse", "TokenStream"]
