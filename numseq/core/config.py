"""Global configuration for numseq.

Manages default settings for the parser, pipeline, and CLI.
Settings can be overridden via environment variables or explicit configuration.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Each nesting level costs a handful of stack frames in the parser and the
# evaluator; this keeps both well below the default recursion limit.
MAX_NESTING_DEPTH_LIMIT = 150


def clamp_nesting_depth(depth: int) -> int:
    """Clamp ``depth`` to ``0..MAX_NESTING_DEPTH_LIMIT``."""
    return max(0, min(depth, MAX_NESTING_DEPTH_LIMIT))


@dataclass
class NumSeqConfig:
    """Top-level configuration for numseq."""

    # Parser
    max_nesting_depth: int = 100

    # Logging
    log_level: str = "WARNING"

    # CLI
    show_banner: bool = True

    @classmethod
    def from_env(cls) -> NumSeqConfig:
        """Build config from environment variables, falling back to defaults."""
        config = cls()

        if val := os.environ.get("NUMSEQ_MAX_NESTING_DEPTH"):
            try:
                depth = int(val)
            except ValueError:
                logger.warning(
                    "Ignoring NUMSEQ_MAX_NESTING_DEPTH=%r (not an integer); using %d",
                    val,
                    config.max_nesting_depth,
                )
            else:
                if depth != clamp_nesting_depth(depth):
                    logger.warning(
                        "NUMSEQ_MAX_NESTING_DEPTH=%d out of range; clamped to %d",
                        depth,
                        clamp_nesting_depth(depth),
                    )
                config.max_nesting_depth = clamp_nesting_depth(depth)
        if val := os.environ.get("NUMSEQ_LOG_LEVEL"):
            config.log_level = val.upper()
        if os.environ.get("NUMSEQ_NO_BANNER"):
            config.show_banner = False

        return config


# Module-level singleton
_config: NumSeqConfig | None = None


def get_config() -> NumSeqConfig:
    """Return the global numseq config, lazily initialized from env."""
    global _config
    if _config is None:
        _config = NumSeqConfig.from_env()
    return _config


def set_config(config: NumSeqConfig | None) -> None:
    """Override the global config (useful in tests). ``None`` re-reads the env on next use."""
    global _config
    _config = config
