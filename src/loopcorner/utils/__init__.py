"""Utility functions for loopcorner.

This module provides utility functions including:

- Logging setup and configuration
- Corner statistics collection
"""

from loopcorner.utils.logging import (
    CornerLogger,
    CornerStats,
    configure_console_logging,
    configure_logging,
)

__all__ = [
    "CornerLogger",
    "CornerStats",
    "configure_console_logging",
    "configure_logging",
]
