"""Utility functions for florist.

This module provides utility functions including:

- Logging setup and configuration
- Generation statistics tracking
"""

from florist.utils.logging import (
    GenerationLogger,
    GenerationStats,
    configure_logging,
)

__all__ = [
    "GenerationLogger",
    "GenerationStats",
    "configure_logging",
]
