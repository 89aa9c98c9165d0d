"""Utility functions for ttf2dxf.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics
"""

from ttf2dxf.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
