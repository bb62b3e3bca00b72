# Lispy: a tree-walking evaluator for S-expressions and Q-expressions.
#
# Runtime values are small classes from lispy.types joined into the closed union
# `LispValue` (Number, Error, Symbol, SExpr, QExpr, Builtin, Lambda). Errors are
# ordinary values: evaluation returns them instead of raising.
#
# Layout:
# - lispy.reader:     source text -> tagged syntax tree (AstNode)
# - lispy.evaluation: syntax tree -> LispValue (`read`), LispValue -> LispValue (`evaluate`)
# - lispy.builtin:    the primitive operations registered into a root Environment
# - lispy.interpreter: glue for the REPL/CLI, owns the root Environment

from typing import Any, Callable

__version__ = "0.1.0"

# Evaluator signature (env, value) -> value, handed to the application engine.
EvaluatorFn = Callable[..., Any]
