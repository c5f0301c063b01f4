"""Utility functions for dxfview.

This module provides utility functions including:

- Logging setup and configuration
- Load, render and snap statistics
"""

from dxfview.utils.logging import (
    ParseStats,
    ViewerLogger,
    configure_logging,
)

__all__ = [
    "ParseStats",
    "ViewerLogger",
    "configure_logging",
]
