"""Utility functions for snowflaker.

This module provides utility functions including:

- Logging setup and configuration
- Generation statistics and progress logging
"""

from snowflaker.utils.logging import (
    GenerationLogger,
    GenerationStats,
    configure_logging,
)

__all__ = [
    "GenerationLogger",
    "GenerationStats",
    "configure_logging",
]
