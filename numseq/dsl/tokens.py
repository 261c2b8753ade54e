"""Token types for the numseq shorthand lexer.

Defines all token kinds and the Token dataclass used by the lexer and parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """All token types recognized by the numseq lexer."""

    # Literals
    NUMBER = auto()  # 42, -0.5, .1

    # Punctuation
    COMMA = auto()  # ,
    REPEAT = auto()  # x
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    # Special
    EOF = auto()


# Single-character symbols that terminate a pending number
SYMBOLS: dict[str, TokenKind] = {
    ",": TokenKind.COMMA,
    "x": TokenKind.REPEAT,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# Characters accumulated into a numeric literal besides digits
NUMBER_CHARS = frozenset(".-")


@dataclass(frozen=True)
class Token:
    """A single token produced by the lexer."""

    kind: TokenKind
    text: str
    line: int = 1
    column: int = 1

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, L{self.line}:{self.column})"

    def describe(self) -> str:
        """Short human-readable form used in error messages."""
        if self.kind == TokenKind.EOF:
            return "end of input"
        return f"{self.kind.name} {self.text!r}"
