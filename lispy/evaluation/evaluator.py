"""Core evaluator for the Lispy interpreter.

A direct tree walk: symbols resolve through the environment chain,
S-expressions evaluate their items left to right and apply the head to the
rest, everything else evaluates to itself. Errors are values; the first one
met while evaluating an S-expression becomes its result.
"""

from __future__ import annotations

from lispy.types import Environment, Error, Lambda, LispValue, QExpr, SExpr, Symbol
from lispy.evaluation.apply import apply


def evaluate(env: Environment, value: LispValue) -> LispValue:
    """Reduce `value` to normal form in `env`."""
    match value:
        case Symbol():
            return env.lookup(value)
        case SExpr():
            return eval_sexpr(env, value)

    # --- Atoms, Q-expressions and functions return as-is ---
    return value


def eval_sexpr(env: Environment, sexpr: SExpr) -> LispValue:
    """Evaluate an S-expression: evaluate every item, then apply the head."""
    if not sexpr.items:
        return sexpr

    cells: list[LispValue] = []
    for item in sexpr:
        result = evaluate(env, item)
        if isinstance(result, Error):
            return result
        cells.append(result)

    if len(cells) == 1:
        single = cells[0]
        # A lambda taking no parameters is called rather than returned.
        if isinstance(single, Lambda) and not single.formals.items:
            return apply(env, single, QExpr(), evaluate)
        return single

    head, *rest = cells
    return apply(env, head, QExpr(rest), evaluate)
