"""Well-formedness validator for numseq shorthand.

Runs the lexer and parser only, discarding the AST. A lexer or parser failure
is reported as a single error (parsing stops at the first violation).
Successful parses may still carry warnings:
- Loops repeated zero times
- Value text that will not convert to a number at evaluation time
"""

from __future__ import annotations

import logging
import math

from numseq.core.types import Severity, ShorthandError, ValidationError
from numseq.dsl.ast_nodes import Loop, Node, Sequence, Value
from numseq.dsl.lexer import LexerError, lex
from numseq.dsl.parser import ParseError, Parser

logger = logging.getLogger(__name__)


def validate_shorthand(
    source: str, max_nesting_depth: int | None = None
) -> list[ValidationError]:
    """Lex and parse ``source``.

    Returns a list of ValidationError objects (empty if valid with no warnings).
    """
    try:
        tokens = lex(source)
        tree = Parser(tokens, max_nesting_depth=max_nesting_depth).parse()
    except LexerError as exc:
        return [_error_from(exc, exc.line, exc.column)]
    except ParseError as exc:
        token = exc.token
        return [_error_from(exc, token.line if token else 0, token.column if token else 0)]

    warnings: list[ValidationError] = []
    _collect_warnings(tree, warnings)
    return warnings


def is_valid(source: str, max_nesting_depth: int | None = None) -> bool:
    """True if ``source`` lexes and parses without errors."""
    return not any(
        e.severity == Severity.ERROR
        for e in validate_shorthand(source, max_nesting_depth=max_nesting_depth)
    )


def _error_from(exc: ShorthandError, line: int, column: int) -> ValidationError:
    logger.debug("Validation failed (%s): %s", exc.kind.value, exc)
    return ValidationError(
        message=str(exc),
        line=line,
        column=column,
        severity=Severity.ERROR.value,
    )


def _collect_warnings(node: Node, warnings: list[ValidationError]) -> None:
    if isinstance(node, Sequence):
        for child in node.children:
            _collect_warnings(child, warnings)
    elif isinstance(node, Loop):
        if int(node.count.text) == 0:
            warnings.append(
                ValidationError(
                    message=f"Loop repeated zero times contributes no values: x{node.count.text}",
                    line=node.count.line,
                    column=node.count.column,
                    severity=Severity.WARNING.value,
                )
            )
        _collect_warnings(node.repeated, warnings)
    elif isinstance(node, Value):
        if not _is_float(node.text):
            warnings.append(
                ValidationError(
                    message=f"Value {node.text!r} is not a valid number and will fail evaluation",
                    line=node.line,
                    column=node.column,
                    severity=Severity.WARNING.value,
                )
            )


def _is_float(text: str) -> bool:
    """Mirror the evaluator: the text must parse to a finite float."""
    try:
        value = float(text)
    except ValueError:
        return False
    return math.isfinite(value)
