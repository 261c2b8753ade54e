"""numseq pipeline: lex, parse, and evaluate shorthand in one call.

    text -> Lexer -> tokens -> Parser -> Sequence -> Evaluator -> list[float]

Any error aborts the whole call; there is no partial result.
"""

from __future__ import annotations

import logging

from numseq.core.types import ExpansionResult, ValidationError
from numseq.dsl.ast_nodes import count_nodes
from numseq.dsl.lexer import lex
from numseq.dsl.parser import Parser
from numseq.dsl.validator import validate_shorthand
from numseq.evaluator.evaluator import Evaluator

logger = logging.getLogger(__name__)


def expand(source: str, max_nesting_depth: int | None = None) -> ExpansionResult:
    """Expand ``source`` and return the values with pipeline statistics.

    Raises LexerError, ParseError, or EvaluationError on malformed input.
    """
    logger.info("Parsing number sequence shorthand: %s", source)

    tokens = lex(source)
    tree = Parser(tokens, max_nesting_depth=max_nesting_depth).parse()
    values = Evaluator().evaluate(tree)

    result = ExpansionResult(
        source=source,
        values=values,
        token_count=len(tokens),
        node_count=count_nodes(tree),
    )
    logger.debug(
        "Expanded %d tokens / %d nodes into %d values",
        result.token_count,
        result.node_count,
        len(result.values),
    )
    return result


def parse_and_evaluate(source: str, max_nesting_depth: int | None = None) -> list[float]:
    """Expand ``source`` into its ordered list of values."""
    return expand(source, max_nesting_depth=max_nesting_depth).values


def validate(source: str, max_nesting_depth: int | None = None) -> list[ValidationError]:
    """Check ``source`` is well-formed without evaluating it.

    Returns at most one error (parsing stops at the first violation), or
    zero or more warnings for input that parses.
    """
    errors = validate_shorthand(source, max_nesting_depth=max_nesting_depth)
    logger.debug("Validated shorthand %r: %d issue(s)", source, len(errors))
    return errors
