"""Hand-written lexer for the numseq shorthand.

Tokenizes shorthand text such as ``(1, 2)x2, 42x3`` into a stream of Token
objects. Numeric text is accumulated verbatim; whether it forms a valid
number is decided later by the evaluator.
"""

from __future__ import annotations

import logging

from numseq.core.types import LexErrorKind, ShorthandError
from numseq.dsl.tokens import NUMBER_CHARS, SYMBOLS, Token, TokenKind

logger = logging.getLogger(__name__)


class LexerError(ShorthandError):
    """Raised when the lexer encounters a character outside the shorthand alphabet."""

    def __init__(self, character: str, line: int, column: int) -> None:
        self.character = character
        self.line = line
        self.column = column
        super().__init__(
            f"Lexer error at L{line}:{column}: Unknown character: {character!r}",
            LexErrorKind.UNKNOWN_CHARACTER,
        )


class Lexer:
    """Tokenize numseq shorthand text.

    Usage:
        lexer = Lexer(source_text)
        tokens = lexer.tokenize()
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []

        # Pending numeric literal and where it started
        self._digits = ""
        self._digits_line = 1
        self._digits_col = 1

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Scan the entire source and return all tokens including EOF."""
        while not self._at_end():
            self._scan_char()

        self._flush_number()
        self._tokens.append(Token(TokenKind.EOF, "", self._line, self._col))
        logger.debug("Lexed %d tokens from %d characters", len(self._tokens), len(self._source))
        return self._tokens

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan_char(self) -> None:
        ch = self._peek()

        if ch.isspace():
            self._flush_number()
            self._advance()
            return

        if ch.isdecimal() or ch in NUMBER_CHARS:
            if not self._digits:
                self._digits_line = self._line
                self._digits_col = self._col
            self._digits += ch
            self._advance()
            return

        self._flush_number()

        kind = SYMBOLS.get(ch)
        if kind is None:
            raise LexerError(ch, self._line, self._col)

        self._tokens.append(Token(kind, ch, self._line, self._col))
        self._advance()

    def _flush_number(self) -> None:
        """Emit the pending numeric literal, if any."""
        if not self._digits:
            return
        self._tokens.append(
            Token(TokenKind.NUMBER, self._digits, self._digits_line, self._digits_col)
        )
        self._digits = ""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self) -> str:
        if self._at_end():
            return "\0"
        return self._source[self._pos]

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch


def lex(source: str) -> list[Token]:
    """Tokenize ``source``; the returned list always ends with one EOF token."""
    return Lexer(source).tokenize()
