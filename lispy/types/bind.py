from __future__ import annotations

from typing import Any, List

from lispy.errors import ErrorKind
from lispy.types.environment import Environment
from lispy.types.error import Error
from lispy.types.expression import QExpr
from lispy.types.symbol import Symbol, VARIADIC

INVALID_VARIADIC = "Function format invalid. Symbol '&' not followed by single symbol."


def check_formals(formals: List[Symbol]) -> Error | None:
    """Reject a parameter list where '&' is not followed by exactly one name."""
    for i, formal in enumerate(formals):
        if formal == VARIADIC and i != len(formals) - 2:
            return Error(INVALID_VARIADIC, ErrorKind.INVALID_LAMBDA_FORMAT)
    return None


def bind_arguments(
    formals: List[Symbol],
    supplied_args: List[Any],
    closure_env: Environment,
) -> tuple[Environment, list[Symbol]] | Error:
    """
    Single source of truth for lambda-list binding in Lispy.

    Binds supplied arguments to formals left to right in a new Environment
    whose outer is `closure_env`. Supports:
    - Positional parameters, one argument per formal
    - `& name`, capturing every remaining argument as a Q-expression
    - Partial application: formals left over when arguments run out are
      returned to the caller, which builds the curried Lambda

    Returns `(local_env, remaining_formals)`, or an Error value for too many
    arguments or a malformed `&`.
    """
    formals = list(formals)
    supplied = list(supplied_args)
    expected = len(formals)
    given = len(supplied)
    local_env = Environment(outer=closure_env)

    while supplied:
        if not formals:
            return Error(
                f"Too many arguments: expected {expected}, got {given}",
                ErrorKind.ARITY_MISMATCH,
            )
        formal = formals.pop(0)
        if formal == VARIADIC:
            if len(formals) != 1:
                return Error(INVALID_VARIADIC, ErrorKind.INVALID_LAMBDA_FORMAT)
            local_env.define(formals.pop(0), QExpr(supplied))
            supplied = []
            break
        local_env.define(formal, supplied.pop(0))

    # A trailing `& name` with nothing left to collect binds the empty list.
    if formals and formals[0] == VARIADIC:
        if len(formals) != 2:
            return Error(INVALID_VARIADIC, ErrorKind.INVALID_LAMBDA_FORMAT)
        local_env.define(formals[1], QExpr())
        formals = []

    return local_env, formals
