from __future__ import annotations

import logging
import sys
from typing import Literal

from lispy.builtin.env_builtin import register
from lispy.config import get_recursion_limit
from lispy.evaluation.evaluator import evaluate
from lispy.evaluation.read import expression_nodes, read
from lispy.modules.prelude_loader import load_prelude
from lispy.reader.parser import parse
from lispy.types import Environment, Error, LispValue

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Lispy code.
    Maintains a root Environment, with all builtins registered, across calls.

    Evaluation recurses on the Python stack, roughly ten frames per nested
    Lisp call. Creating an Interpreter raises the process recursion limit to
    LISPY_RECURSION_LIMIT (never lowers it); recursion deeper than that still
    ends in RecursionError.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            logger.debug("raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()
        register(self.env)

        if prelude == 'auto':
            try:
                load_prelude(self)
            except FileNotFoundError as exc:
                logger.warning("no prelude found, starting with builtins only: %s", exc)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for result in self.eval_each(code):
            if isinstance(result, Error):
                logger.warning("prelude expression failed: %s", result)

    def eval(self, code: str) -> LispValue:
        """Evaluate a whole input as one S-expression, as the REPL does.

        `+ 1 2` and `(+ 1 2)` both give 3; several parenthesised forms on one
        line are applied like any other S-expression.
        """
        return evaluate(self.env, read(parse(code)))

    def eval_each(self, code: str) -> list[LispValue]:
        """Evaluate each top-level expression on its own, in order.

        An Error from one expression does not stop the ones after it.
        """
        tree = parse(code)
        return [evaluate(self.env, read(node)) for node in expression_nodes(tree)]
