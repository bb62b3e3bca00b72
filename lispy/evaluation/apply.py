"""Application engine for Lispy.

This module centralizes function application semantics for the interpreter:
- Builtins are called with the calling environment and the argument list.
- Lambdas bind their arguments in a fresh child of the captured environment.
  Too few arguments yields a curried Lambda over the partial bindings; the
  body is only evaluated once every formal is bound.

Keeping this logic in one place prevents duplication between the evaluator
and builtins that call back into it.
"""

from __future__ import annotations

import logging

from lispy import EvaluatorFn
from lispy.errors import ErrorKind
from lispy.types import Builtin, Environment, Error, Lambda, LispValue, QExpr, SExpr, type_name
from lispy.types.bind import bind_arguments

logger = logging.getLogger(__name__)


def apply_lambda(fn: Lambda, args: QExpr, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lisp Lambda value.

    Parameters:
    - fn: The Lambda being applied.
    - args: The already-evaluated argument values.
    - evaluate_fn: Evaluator used for the body once all formals are bound.

    Behavior:
    - Fewer arguments than formals returns a new Lambda that closes over the
      provided arguments and expects the remaining formals.
    - Too many arguments, or a malformed `&`, returns an Error value.
    """
    bound = bind_arguments(fn.formals.items, args.items, fn.env)
    if isinstance(bound, Error):
        return bound

    local_env, remaining = bound
    if remaining:
        logger.debug("partial application of %s, awaiting %d more", fn, len(remaining))
        return Lambda(QExpr(remaining), fn.body.copy(), local_env)

    logger.debug("applying %s to %s", fn, args)
    return evaluate_fn(local_env, SExpr(fn.body.copy()))


def apply(env: Environment, head: LispValue, args: QExpr, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Lambda or a Builtin.

    - For Lambda, defer to apply_lambda (handling partials and `&`).
    - For Builtins, invoke with the calling env and list of args.
    - Otherwise, return a not-a-function Error value.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    if isinstance(head, Builtin):
        return head(env, args)
    return Error(
        f"S-Expression starts with incorrect type. Got {type_name(head)}, Expected Function.",
        ErrorKind.NOT_A_FUNCTION,
    )
