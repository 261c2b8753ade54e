"""numseq evaluator: expands a parsed AST into a flat list of floats.

Takes a Sequence (from the parser) and produces the fully expanded, ordered
list of values: children left to right, loop repetitions appended
consecutively, groups expanded depth-first.
"""

from __future__ import annotations

import logging
import math
import sys

from numseq.core.types import EvalErrorKind, ShorthandError
from numseq.dsl.ast_nodes import Loop, Node, Sequence, Value

logger = logging.getLogger(__name__)


class EvaluationError(ShorthandError):
    """Raised when a value or repeat count cannot be converted to a number."""

    def __init__(self, kind: EvalErrorKind, text: str) -> None:
        self.text = text
        if kind == EvalErrorKind.INVALID_COUNT:
            message = f"Failed to parse repeat count: {text!r}"
        else:
            message = f"Failed to parse number: {text!r}"
        super().__init__(f"Evaluation error: {message}", kind)


class Evaluator:
    """Evaluate AST nodes into expanded value lists.

    Usage:
        evaluator = Evaluator()
        values = evaluator.evaluate(sequence)
    """

    def evaluate(self, node: Node) -> list[float]:
        """Expand ``node`` into its ordered list of values."""
        values = self._evaluate(node)
        logger.debug("Evaluated tree into %d values", len(values))
        return values

    # ------------------------------------------------------------------
    # Node evaluators
    # ------------------------------------------------------------------

    def _evaluate(self, node: Node) -> list[float]:
        if isinstance(node, Sequence):
            return self._evaluate_sequence(node)
        if isinstance(node, Loop):
            return self._evaluate_loop(node)
        if isinstance(node, Value):
            return [self._evaluate_value(node)]
        raise TypeError(f"Unknown AST node: {type(node).__name__}")

    def _evaluate_sequence(self, node: Sequence) -> list[float]:
        values: list[float] = []
        for child in node.children:
            values.extend(self._evaluate(child))
        return values

    def _evaluate_loop(self, node: Loop) -> list[float]:
        """Evaluate the repeated element once, then tile it ``count`` times."""
        count = self._evaluate_count(node.count)
        if isinstance(node.repeated, Value):
            once = [self._evaluate_value(node.repeated)]
        else:
            once = self._evaluate_sequence(node.repeated)
        return once * count

    @staticmethod
    def _evaluate_value(node: Value) -> float:
        """Parse a 64-bit float; out-of-range literals are rejected, not turned into inf."""
        try:
            value = float(node.text)
        except ValueError:
            raise EvaluationError(EvalErrorKind.INVALID_NUMBER, node.text) from None
        if not math.isfinite(value):
            raise EvaluationError(EvalErrorKind.INVALID_NUMBER, node.text)
        return value

    @staticmethod
    def _evaluate_count(node: Value) -> int:
        try:
            count = int(node.text)
        except ValueError:
            raise EvaluationError(EvalErrorKind.INVALID_COUNT, node.text) from None
        if not 0 <= count <= sys.maxsize:
            raise EvaluationError(EvalErrorKind.INVALID_COUNT, node.text)
        return count


def evaluate(node: Node) -> list[float]:
    """Expand ``node`` into its ordered list of values."""
    return Evaluator().evaluate(node)
