"""Utility functions for boroughmap.

This module provides utility functions including:

- Logging setup and configuration
- Build progress and statistics tracking
"""

from boroughmap.utils.logging import (
    BuildLogger,
    BuildStats,
    configure_logging,
)

__all__ = [
    "BuildLogger",
    "BuildStats",
    "configure_logging",
]
