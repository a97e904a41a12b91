"""Utility functions for hullmesh.

This module provides utility functions including:

- Logging setup and configuration
- Batch processing statistics
"""

from hullmesh.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
