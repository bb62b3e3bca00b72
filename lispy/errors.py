from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification carried by every Error value."""

    UNBOUND_SYMBOL = "UnboundSymbol"
    ARITY_MISMATCH = "ArityMismatch"
    TYPE_MISMATCH = "TypeMismatch"
    EMPTY_LIST = "EmptyList"
    DIVISION_BY_ZERO = "DivisionByZero"
    INVALID_NUMBER_LITERAL = "InvalidNumberLiteral"
    NOT_A_FUNCTION = "NotAFunction"
    INVALID_LAMBDA_FORMAT = "InvalidLambdaFormat"


class LispyError(Exception):
    """ Base class for all host-level Lispy errors"""
    pass


class LispyInvalidSymbol(LispyError):
    """ Raised when something other than a Symbol is used as a binding name"""
    pass


class LispySyntaxError(LispyError):
    """ Raised when source text cannot be turned into a syntax tree"""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line:
            return f"{self.line}:{self.column}: error: {self.message}"
        return f"error: {self.message}"
