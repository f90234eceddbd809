"""Utility functions for font2css.

This module provides:

- Logging setup and configuration
- Per-file processing statistics
"""

from font2css.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
