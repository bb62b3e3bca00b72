"""Value model for Lispy.

Every runtime datum is exactly one of the classes below. `LispValue` is the
closed union of them; code dispatches with `match`/`isinstance` and never
reaches a field that does not belong to the value's class.
"""

from __future__ import annotations

from typing import Union

from lispy.types.error import Error
from lispy.types.number import Number, read_number
from lispy.types.symbol import Symbol, VARIADIC
from lispy.types.expression import Expression, SExpr, QExpr
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda

LispValue = Union[Number, Error, Symbol, SExpr, QExpr, Builtin, Lambda]


def type_name(value: LispValue) -> str:
    """User-facing name of a value's variant, as used in error messages."""
    return value.TYPE_NAME


__all__ = [
    "LispValue",
    "Number",
    "Error",
    "Symbol",
    "VARIADIC",
    "Expression",
    "SExpr",
    "QExpr",
    "Builtin",
    "Lambda",
    "Environment",
    "read_number",
    "type_name",
]
