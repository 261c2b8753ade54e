"""numseq evaluator: expands a parsed shorthand AST into numbers.

Usage:
    from numseq.evaluator import Evaluator

    values = Evaluator().evaluate(sequence)
"""

from numseq.evaluator.evaluator import EvaluationError, Evaluator, evaluate

__all__ = [
    "EvaluationError",
    "Evaluator",
    "evaluate",
]
