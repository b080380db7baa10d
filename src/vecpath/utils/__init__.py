"""Utility functions for vecpath.

This module provides utility functions including:

- Logging setup and configuration
- Per-frame drawing statistics
"""

from vecpath.utils.logging import (
    FrameLogger,
    FrameStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "FrameLogger",
    "FrameStats",
    "configure_logging",
    "get_logger",
]
