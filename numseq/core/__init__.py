"""numseq core: shared types, enums, and configuration.

Import the most commonly used types from here for convenience:

    from numseq.core import ExpansionResult, ShorthandError, get_config
"""

from numseq.core.config import NumSeqConfig, get_config, set_config
from numseq.core.types import (
    EvalErrorKind,
    ExpansionResult,
    LexErrorKind,
    ParseErrorKind,
    Severity,
    ShorthandError,
    ValidationError,
)

__all__ = [
    "EvalErrorKind",
    "ExpansionResult",
    "LexErrorKind",
    "NumSeqConfig",
    "ParseErrorKind",
    "Severity",
    "ShorthandError",
    "ValidationError",
    "get_config",
    "set_config",
]
