"""Hand-written recursive descent parser for the numseq shorthand.

Consumes a list of Token objects from the lexer and produces a Sequence AST.

Grammar:
    sequence ::= element ( "," element )*
    element  ::= atom ( "x" integer )?
    atom     ::= NUMBER | "(" sequence ")"

Every token's successor is checked against a transition table before any
structure is built, so the first grammar violation aborts the parse.
"""

from __future__ import annotations

import logging
import sys

from numseq.core.config import clamp_nesting_depth, get_config
from numseq.core.types import ParseErrorKind, ShorthandError
from numseq.dsl.ast_nodes import Loop, Sequence, Value
from numseq.dsl.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


# Permitted successor kinds for each token kind
TRANSITIONS: dict[TokenKind, frozenset[TokenKind]] = {
    TokenKind.LPAREN: frozenset({TokenKind.NUMBER, TokenKind.LPAREN}),
    TokenKind.RPAREN: frozenset(
        {TokenKind.COMMA, TokenKind.RPAREN, TokenKind.EOF, TokenKind.REPEAT}
    ),
    TokenKind.COMMA: frozenset({TokenKind.NUMBER, TokenKind.LPAREN}),
    TokenKind.NUMBER: frozenset(
        {TokenKind.COMMA, TokenKind.RPAREN, TokenKind.EOF, TokenKind.REPEAT}
    ),
    TokenKind.REPEAT: frozenset({TokenKind.NUMBER}),
    TokenKind.EOF: frozenset({TokenKind.EOF}),
}

_SEQUENCE_STARTS = frozenset({TokenKind.NUMBER, TokenKind.LPAREN})


class ParseError(ShorthandError):
    """Raised when the parser encounters a grammar violation."""

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        token: Token | None = None,
        after: Token | None = None,
    ) -> None:
        self.token = token
        self.after = after
        loc = f" at L{token.line}:{token.column}" if token is not None else ""
        super().__init__(f"Parse error{loc}: {message}", kind)


def find_matching_paren(tokens: list[Token], start: int) -> int:
    """Return the index of the RPAREN closing the LPAREN at ``tokens[start]``.

    Raises ParseError(UNMATCHED_PARENTHESIS) if the group is never closed.
    """
    depth = 0
    for i in range(start, len(tokens)):
        kind = tokens[i].kind
        if kind == TokenKind.LPAREN:
            depth += 1
        elif kind == TokenKind.RPAREN:
            depth -= 1
            if depth == 0:
                return i
    raise ParseError(
        ParseErrorKind.UNMATCHED_PARENTHESIS,
        "Unmatched '(' (no closing parenthesis)",
        tokens[start],
    )


def is_count_literal(text: str) -> bool:
    """True if ``text`` spells a non-negative integer no larger than ``sys.maxsize``.

    Only ASCII digits are accepted: no sign, no decimal point.
    """
    if not (text.isascii() and text.isdigit()):
        return False
    # Longer than any index-sized integer; also avoids int() digit limits
    if len(text.lstrip("0")) > len(str(sys.maxsize)):
        return False
    return int(text) <= sys.maxsize


class Parser:
    """Parse a numseq token stream into a Sequence AST.

    Usage:
        parser = Parser(tokens)
        sequence = parser.parse()
    """

    def __init__(self, tokens: list[Token], max_nesting_depth: int | None = None) -> None:
        self._tokens = list(tokens)
        if max_nesting_depth is None:
            max_nesting_depth = get_config().max_nesting_depth
        self._max_depth = clamp_nesting_depth(max_nesting_depth)

        # The lexer always appends EOF; tolerate hand-built streams without it
        body = self._tokens
        while body and body[-1].kind == TokenKind.EOF:
            body = body[:-1]
        self._body = body
        if len(body) < len(self._tokens):
            self._eof = self._tokens[len(body)]
        else:
            self._eof = _end_token(body)

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def parse(self) -> Sequence:
        """Parse the full token stream into a Sequence."""
        sequence = self._parse_sequence(self._body, 0, self._eof)
        logger.debug(
            "Parsed %d tokens into %d top-level elements",
            len(self._tokens),
            len(sequence.children),
        )
        return sequence

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _parse_sequence(self, tokens: list[Token], depth: int, end: Token) -> Sequence:
        """Parse comma-separated elements; ``end`` is the token that follows the slice."""
        if not tokens:
            return Sequence()

        first = tokens[0]
        if first.kind not in _SEQUENCE_STARTS:
            raise ParseError(
                ParseErrorKind.UNEXPECTED_SEQUENCE_START,
                f"Sequence cannot start with {first.describe()}",
                first,
            )

        children: list[Sequence | Loop | Value] = []
        element: list[Token] = []
        open_parens: list[Token] = []

        for i, token in enumerate(tokens):
            next_token = tokens[i + 1] if i + 1 < len(tokens) else end
            self._check_transition(token, next_token)

            if token.kind == TokenKind.LPAREN:
                open_parens.append(token)
            elif token.kind == TokenKind.RPAREN:
                if not open_parens:
                    raise ParseError(
                        ParseErrorKind.UNMATCHED_PARENTHESIS,
                        "Unmatched ')' (no opening parenthesis)",
                        token,
                    )
                open_parens.pop()

            if token.kind == TokenKind.COMMA and not open_parens:
                children.append(self._parse_element(element, depth))
                element = []
            else:
                element.append(token)

        if open_parens:
            raise ParseError(
                ParseErrorKind.UNMATCHED_PARENTHESIS,
                "Unmatched '(' (no closing parenthesis)",
                open_parens[0],
            )

        if element:
            children.append(self._parse_element(element, depth))

        return Sequence(tuple(children))

    def _parse_element(self, tokens: list[Token], depth: int) -> Sequence | Loop | Value:
        split = self._find_repeat(tokens)
        if split is not None:
            return self._parse_loop(tokens, split, depth)
        if tokens[0].kind == TokenKind.NUMBER:
            return self._parse_number(tokens)
        return self._parse_group(tokens, depth)

    def _parse_loop(self, tokens: list[Token], split: int, depth: int) -> Loop:
        """``split`` is the index of the last 'x' outside any group."""
        marker = tokens[split]
        left, right = tokens[:split], tokens[split + 1 :]

        if not left:
            raise ParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                "'x' must follow a number or a group",
                marker,
            )
        if not right:
            raise ParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                "'x' must be followed by a repeat count",
                marker,
            )

        if left[0].kind == TokenKind.NUMBER:
            repeated: Value | Sequence = self._parse_number(left)
        else:
            repeated = self._parse_group(left, depth)

        count = self._parse_number(right)
        if not is_count_literal(count.text):
            raise ParseError(
                ParseErrorKind.INVALID_COUNT,
                f"Repeat count must be a non-negative integer up to {sys.maxsize}, got {count.text!r}",
                right[0],
            )

        return Loop(repeated=repeated, count=count)

    def _parse_group(self, tokens: list[Token], depth: int) -> Sequence:
        """Strip the outermost matching parentheses and parse the interior."""
        opener = tokens[0]
        if opener.kind != TokenKind.LPAREN:
            raise ParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                f"Expected a number or '(', got {opener.describe()}",
                opener,
            )

        close = find_matching_paren(tokens, 0)
        if close != len(tokens) - 1:
            trailing = tokens[close + 1]
            raise ParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                f"Unexpected {trailing.describe()} after group",
                trailing,
                after=tokens[close],
            )

        if depth + 1 > self._max_depth:
            raise ParseError(
                ParseErrorKind.NESTING_TOO_DEEP,
                f"Groups nested deeper than {self._max_depth} levels",
                opener,
            )

        return self._parse_sequence(tokens[1:close], depth + 1, tokens[close])

    def _parse_number(self, tokens: list[Token]) -> Value:
        token = tokens[0]
        if token.kind != TokenKind.NUMBER:
            raise ParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                f"Expected a number, got {token.describe()}",
                token,
            )
        if len(tokens) > 1:
            raise ParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                f"Unexpected {tokens[1].describe()} after {token.describe()}",
                tokens[1],
                after=token,
            )
        return Value(token.text, line=token.line, column=token.column)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check_transition(token: Token, next_token: Token) -> None:
        if next_token.kind not in TRANSITIONS[token.kind]:
            raise ParseError(
                ParseErrorKind.UNEXPECTED_TOKEN,
                f"Unexpected {next_token.describe()} after {token.describe()}",
                next_token,
                after=token,
            )

    @staticmethod
    def _find_repeat(tokens: list[Token]) -> int | None:
        """Index of the last 'x' outside any group, or None."""
        found = None
        i = 0
        while i < len(tokens):
            kind = tokens[i].kind
            if kind == TokenKind.LPAREN:
                i = find_matching_paren(tokens, i)
            elif kind == TokenKind.REPEAT:
                found = i
            i += 1
        return found


def _end_token(tokens: list[Token]) -> Token:
    """Synthesize an EOF token positioned just past ``tokens``."""
    if not tokens:
        return Token(TokenKind.EOF, "")
    last = tokens[-1]
    return Token(TokenKind.EOF, "", last.line, last.column + len(last.text))


def parse_sequence(tokens: list[Token], max_nesting_depth: int | None = None) -> Sequence:
    """Parse ``tokens`` (as produced by the lexer) into a Sequence AST."""
    return Parser(tokens, max_nesting_depth=max_nesting_depth).parse()
