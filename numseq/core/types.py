"""Core data types for numseq.

Shared enums, the exception base class, and result dataclasses used across
the lexer, parser, evaluator, and CLI. Result types are JSON-serializable via
their to_dict/from_dict/to_json methods.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Severity(str, Enum):
    """Validation severity levels."""

    WARNING = "warning"
    ERROR = "error"


class LexErrorKind(str, Enum):
    """Reasons the lexer rejects input."""

    UNKNOWN_CHARACTER = "unknown_character"


class ParseErrorKind(str, Enum):
    """Reasons the parser rejects a token stream."""

    UNEXPECTED_TOKEN = "unexpected_token"
    UNEXPECTED_SEQUENCE_START = "unexpected_sequence_start"
    UNMATCHED_PARENTHESIS = "unmatched_parenthesis"
    INVALID_COUNT = "invalid_count"
    NESTING_TOO_DEEP = "nesting_too_deep"


class EvalErrorKind(str, Enum):
    """Reasons evaluation of a parsed tree fails."""

    INVALID_NUMBER = "invalid_number"
    INVALID_COUNT = "invalid_count"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ShorthandError(Exception):
    """Base class for every error raised while lexing, parsing, or evaluating."""

    kind: Enum

    def __init__(self, message: str, kind: Enum) -> None:
        self.kind = kind
        super().__init__(message)


# ---------------------------------------------------------------------------
# Validation types
# ---------------------------------------------------------------------------


@dataclass
class ValidationError:
    """A validation error or warning from the shorthand validator."""

    message: str
    line: int = 0
    column: int = 0
    severity: str = "error"

    def __str__(self) -> str:
        loc = f"L{self.line}:{self.column}" if self.line else "unknown"
        return f"[{self.severity}] {loc}: {self.message}"


# ---------------------------------------------------------------------------
# Expansion result
# ---------------------------------------------------------------------------


@dataclass
class ExpansionResult:
    """The output of expanding a single shorthand string."""

    source: str
    values: list[float] = field(default_factory=list)
    token_count: int = 0
    node_count: int = 0

    def __len__(self) -> int:
        return len(self.values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "values": self.values,
            "token_count": self.token_count,
            "node_count": self.node_count,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize to the JSON written by `numseq expand --json`."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExpansionResult:
        return cls(
            source=data["source"],
            values=[float(v) for v in data.get("values", [])],
            token_count=data.get("token_count", 0),
            node_count=data.get("node_count", 0),
        )
