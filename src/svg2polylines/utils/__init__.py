"""Utility functions for svg2polylines.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics
"""

from svg2polylines.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
