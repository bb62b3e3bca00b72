"""Integer values and numeric literal parsing."""

from __future__ import annotations

import re

from lispy.errors import ErrorKind
from lispy.types.error import Error

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_NUMBER_RE = re.compile(r"-?[0-9]+")


def wrap_int64(n: int) -> int:
    """Reduce `n` to a signed 64-bit two's complement integer."""
    return (n - INT64_MIN) % 2**64 + INT64_MIN


class Number:
    __slots__ = ("value",)

    TYPE_NAME = "Number"

    def __init__(self, value: int):
        self.value = value

    def copy(self) -> Number:
        return Number(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value})"

    def __str__(self):
        return str(self.value)


def read_number(text: str) -> Number | Error:
    """Parse a decimal literal; out-of-range or malformed text is an Error value."""
    if not _NUMBER_RE.fullmatch(text):
        return Error("invalid number", ErrorKind.INVALID_NUMBER_LITERAL)
    n = int(text)
    if not INT64_MIN <= n <= INT64_MAX:
        return Error("invalid number", ErrorKind.INVALID_NUMBER_LITERAL)
    return Number(n)
