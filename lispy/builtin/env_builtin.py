"""Built-in functions for the Lispy runtime environment.

This module defines arithmetic, comparison, list processing, variable
definition, lambda construction and the conditional, plus the registration
table exposed to Lisp code.

Every builtin takes the calling environment and the evaluated arguments as a
Q-expression and returns a value. Argument checks run in a fixed order
(count, then the type of each position, then emptiness) and the first failed
check is returned as an Error value.
"""
from __future__ import annotations

import logging
import operator
from typing import Callable

from lispy.errors import ErrorKind
from lispy.types import (
    Builtin,
    Environment,
    Error,
    Lambda,
    LispValue,
    Number,
    QExpr,
    SExpr,
    Symbol,
    type_name,
)
from lispy.types.bind import check_formals
from lispy.types.number import wrap_int64
from lispy.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


# -------------------------------
# Argument checks
# -------------------------------
def _check_count(name: str, args: QExpr, expected: int) -> Error | None:
    if len(args) != expected:
        return Error(
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(args)}, Expected {expected}.",
            ErrorKind.ARITY_MISMATCH,
        )
    return None


def _check_some(name: str, args: QExpr) -> Error | None:
    if not args.items:
        return Error(f"Function '{name}' passed no arguments.", ErrorKind.ARITY_MISMATCH)
    return None


def _check_type(name: str, args: QExpr, index: int, expected: type) -> Error | None:
    value = args[index]
    if not isinstance(value, expected):
        return Error(
            f"Function '{name}' passed incorrect type for argument {index}. "
            f"Got {type_name(value)}, Expected {expected.TYPE_NAME}.",
            ErrorKind.TYPE_MISMATCH,
        )
    return None


def _check_not_empty(name: str, args: QExpr, index: int) -> Error | None:
    if not args[index].items:
        return Error(f"Function '{name}' passed {{}}!", ErrorKind.EMPTY_LIST)
    return None


def _check_symbols(name: str, symbols: QExpr) -> Error | None:
    for sym in symbols:
        if not isinstance(sym, Symbol):
            return Error(
                f"Function '{name}' cannot define non-symbol. "
                f"Got {type_name(sym)}, Expected Symbol.",
                ErrorKind.TYPE_MISMATCH,
            )
    return None


# -------------------------------
# Arithmetic
# -------------------------------
def _truncate_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _truncate_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _truncate_div(a, b)


def _fold_numbers(
    name: str,
    args: QExpr,
    op: Callable[[int, int], int],
    checks_zero: bool = False,
    unary: Callable[[int], int] | None = None,
) -> LispValue:
    error = _check_some(name, args)
    if error:
        return error
    if not all(isinstance(arg, Number) for arg in args):
        return Error("Cannot operate on non-number!", ErrorKind.TYPE_MISMATCH)

    first, *rest = (arg.value for arg in args)
    if unary is not None and not rest:
        return Number(wrap_int64(unary(first)))

    result = first
    for y in rest:
        if checks_zero and y == 0:
            return Error("Division by zero!", ErrorKind.DIVISION_BY_ZERO)
        result = wrap_int64(op(result, y))
    return Number(result)


def add(env: Environment, args: QExpr) -> LispValue:
    """Sum of all arguments."""
    return _fold_numbers("+", args, operator.add)


def sub(env: Environment, args: QExpr) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    return _fold_numbers("-", args, operator.sub, unary=operator.neg)


def mul(env: Environment, args: QExpr) -> LispValue:
    """Product of all arguments."""
    return _fold_numbers("*", args, operator.mul)


def div(env: Environment, args: QExpr) -> LispValue:
    """Divide left-to-right, truncating; a zero divisor is an Error."""
    return _fold_numbers("/", args, _truncate_div, checks_zero=True)


def mod(env: Environment, args: QExpr) -> LispValue:
    """Remainder left-to-right; a zero divisor is an Error."""
    return _fold_numbers("%", args, _truncate_mod, checks_zero=True)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: QExpr) -> LispValue:
    """Return the arguments as a Q-expression."""
    return QExpr(args.items)


def head(env: Environment, args: QExpr) -> LispValue:
    """Q-expression holding only the first element."""
    error = (
        _check_count("head", args, 1)
        or _check_type("head", args, 0, QExpr)
        or _check_not_empty("head", args, 0)
    )
    if error:
        return error
    return QExpr(args[0].items[:1])


def tail(env: Environment, args: QExpr) -> LispValue:
    """Q-expression with the first element removed."""
    error = (
        _check_count("tail", args, 1)
        or _check_type("tail", args, 0, QExpr)
        or _check_not_empty("tail", args, 0)
    )
    if error:
        return error
    return QExpr(args[0].items[1:])


def init(env: Environment, args: QExpr) -> LispValue:
    """Q-expression with the last element removed."""
    error = (
        _check_count("init", args, 1)
        or _check_type("init", args, 0, QExpr)
        or _check_not_empty("init", args, 0)
    )
    if error:
        return error
    return QExpr(args[0].items[:-1])


def join(env: Environment, args: QExpr) -> LispValue:
    """Concatenate Q-expressions."""
    error = _check_some("join", args)
    if error:
        return error
    for i in range(len(args)):
        error = _check_type("join", args, i, QExpr)
        if error:
            return error
    return QExpr(item for qexpr in args for item in qexpr)


def cons(env: Environment, args: QExpr) -> LispValue:
    """(cons x {xs...}) => {x xs...}"""
    error = _check_count("cons", args, 2) or _check_type("cons", args, 1, QExpr)
    if error:
        return error
    value, qexpr = args
    return QExpr([value, *qexpr])


def len_builtin(env: Environment, args: QExpr) -> LispValue:
    """Number of elements of a Q-expression."""
    error = _check_count("len", args, 1) or _check_type("len", args, 0, QExpr)
    if error:
        return error
    return Number(len(args[0]))


def eval_builtin(env: Environment, args: QExpr) -> LispValue:
    """Evaluate a Q-expression as an S-expression in the calling environment."""
    error = _check_count("eval", args, 1) or _check_type("eval", args, 0, QExpr)
    if error:
        return error
    return evaluate(env, SExpr(args[0]))


# -------------------------------
# Variables and functions
# -------------------------------
def _define(name: str, env: Environment, args: QExpr, bind: Callable[[Symbol, LispValue], None]) -> LispValue:
    error = (
        _check_some(name, args)
        or _check_type(name, args, 0, QExpr)
        or _check_symbols(name, args[0])
    )
    if error:
        return error

    symbols, *values = args
    if len(symbols) != len(values):
        return Error(
            f"Function '{name}' passed incorrect number of values to symbols. "
            f"Got {len(values)}, Expected {len(symbols)}.",
            ErrorKind.ARITY_MISMATCH,
        )
    for sym, value in zip(symbols, values):
        bind(sym, value)
    return SExpr()


def def_builtin(env: Environment, args: QExpr) -> LispValue:
    """(def {a b} 1 2) binds in the root environment."""
    return _define("def", env, args, env.define_global)


def put_builtin(env: Environment, args: QExpr) -> LispValue:
    """(= {a b} 1 2) binds in the current environment."""
    return _define("=", env, args, env.define)


def lambda_builtin(env: Environment, args: QExpr) -> LispValue:
    """(\\ {formals} {body}) builds a closure over a fresh scope of `env`."""
    error = (
        _check_count("\\", args, 2)
        or _check_type("\\", args, 0, QExpr)
        or _check_type("\\", args, 1, QExpr)
        or _check_symbols("\\", args[0])
        or check_formals(args[0].items)
    )
    if error:
        return error
    formals, body = args
    return Lambda(formals, body, env.child())


def fun_builtin(env: Environment, args: QExpr) -> LispValue:
    """(fun {name formals...} {body}) defines a named function in the root.

    The function closes over a fresh scope of the calling environment, exactly
    as `\\` would there, so it sees nothing but the caller's bindings.
    """
    error = (
        _check_count("fun", args, 2)
        or _check_type("fun", args, 0, QExpr)
        or _check_type("fun", args, 1, QExpr)
        or _check_not_empty("fun", args, 0)
        or _check_symbols("fun", args[0])
    )
    if error:
        return error
    signature, body = args
    name, *formals = signature
    error = check_formals(formals)
    if error:
        return error
    env.define_global(name, Lambda(QExpr(formals), body, env.child()))
    return SExpr()


# -------------------------------
# Conditional
# -------------------------------
def if_builtin(env: Environment, args: QExpr) -> LispValue:
    """(if cond {then} {else}); any nonzero condition is true."""
    error = (
        _check_count("if", args, 3)
        or _check_type("if", args, 0, Number)
        or _check_type("if", args, 1, QExpr)
        or _check_type("if", args, 2, QExpr)
    )
    if error:
        return error
    cond, then_branch, else_branch = args
    branch = then_branch if cond.value != 0 else else_branch
    return evaluate(env, SExpr(branch))


# -------------------------------
# Equality and comparison
# -------------------------------
def equals(env: Environment, args: QExpr) -> LispValue:
    """1 if both arguments are structurally equal, else 0."""
    error = _check_count("==", args, 2)
    if error:
        return error
    a, b = args
    return Number(int(a == b))


def not_equals(env: Environment, args: QExpr) -> LispValue:
    """1 if the arguments differ, else 0."""
    error = _check_count("!=", args, 2)
    if error:
        return error
    a, b = args
    return Number(int(a != b))


def _compare(name: str, args: QExpr, op: Callable[[int, int], bool]) -> LispValue:
    error = (
        _check_count(name, args, 2)
        or _check_type(name, args, 0, Number)
        or _check_type(name, args, 1, Number)
    )
    if error:
        return error
    a, b = args
    return Number(int(op(a.value, b.value)))


def gt(env: Environment, args: QExpr) -> LispValue:
    return _compare(">", args, operator.gt)


def gte(env: Environment, args: QExpr) -> LispValue:
    return _compare(">=", args, operator.ge)


def lt(env: Environment, args: QExpr) -> LispValue:
    return _compare("<", args, operator.lt)


def lte(env: Environment, args: QExpr) -> LispValue:
    return _compare("<=", args, operator.le)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Environment, QExpr], LispValue]] = {
    # List functions
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "init": init,
    "eval": eval_builtin,
    "join": join,
    "cons": cons,
    "len": len_builtin,
    # Math functions
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    # Variable functions
    "def": def_builtin,
    "=": put_builtin,
    "\\": lambda_builtin,
    "fun": fun_builtin,
    # Conditional
    "if": if_builtin,
    # Comparison functions
    "==": equals,
    "!=": not_equals,
    ">": gt,
    ">=": gte,
    "<": lt,
    "<=": lte,
}


def register(env: Environment) -> None:
    """Bind every builtin in `env`, normally the root environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    logger.debug("registered %d builtins", len(BUILTINS))
