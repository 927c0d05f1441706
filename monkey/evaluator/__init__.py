"""
Monkey Evaluator Package

Tree-walking interpreter for the implemented subset of Monkey: integer
and boolean literals, prefix and infix operators, if/else, blocks and
return.

Author: xwest
"""

from .objects import (
    Object, Integer, Boolean, Null, ReturnValue, NULL, TRUE, FALSE,
    inspect, is_truthy,
)
from .evaluator import (
    Evaluator, EvaluationResult, eval_node, eval_program, evaluate_string,
)
from .errors import EvaluationError

__all__ = [
    "Evaluator", "EvaluationResult", "eval_node", "eval_program", "evaluate_string",
    "Object", "Integer", "Boolean", "Null", "ReturnValue", "NULL", "TRUE", "FALSE",
    "inspect", "is_truthy",
    "EvaluationError",
]
