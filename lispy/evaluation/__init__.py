from lispy.evaluation.read import read, expression_nodes
from lispy.evaluation.evaluator import evaluate, eval_sexpr
from lispy.evaluation.apply import apply, apply_lambda

__all__ = ["read", "expression_nodes", "evaluate", "eval_sexpr", "apply", "apply_lambda"]
