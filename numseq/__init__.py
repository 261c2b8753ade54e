"""numseq: expand compact number-sequence shorthand into explicit values.

Usage:
    from numseq import parse_and_evaluate, validate

    parse_and_evaluate("(1, 2)x2, 42x3")   # [1.0, 2.0, 1.0, 2.0, 42.0, 42.0, 42.0]
    validate("1,,2")                       # [ValidationError(...)]
"""

from numseq.core.types import ExpansionResult, ShorthandError, ValidationError
from numseq.dsl.lexer import LexerError
from numseq.dsl.parser import ParseError
from numseq.evaluator.evaluator import EvaluationError
from numseq.pipeline import expand, parse_and_evaluate, validate

__version__ = "0.1.0"

__all__ = [
    "EvaluationError",
    "ExpansionResult",
    "LexerError",
    "ParseError",
    "ShorthandError",
    "ValidationError",
    "expand",
    "parse_and_evaluate",
    "validate",
]
