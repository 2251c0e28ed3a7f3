"""Utility functions for strokefont.

This module provides utility functions including:

- Logging setup and configuration
- Synthesis statistics tracking
"""

from strokefont.utils.logging import (
    SynthesisLogger,
    SynthesisStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "SynthesisLogger",
    "SynthesisStats",
    "configure_logging",
    "get_logger",
]
