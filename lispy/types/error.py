from __future__ import annotations

from lispy.errors import ErrorKind


class Error:
    """A failure that travels through evaluation as an ordinary value.

    Equality only looks at the message; `kind` is there for callers that want
    to branch on the category without parsing text.
    """

    __slots__ = ("message", "kind")

    TYPE_NAME = "Error"

    def __init__(self, message: str, kind: ErrorKind | None = None):
        self.message = message
        self.kind = kind

    def copy(self) -> Error:
        return Error(self.message, self.kind)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self):
        return f"Error({self.message!r})"

    def __str__(self):
        return f"Error: {self.message}"
