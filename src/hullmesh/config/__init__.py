"""Configuration management for hullmesh.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Tolerances and limits for the algorithms
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- HullmeshSettings: Main application settings
"""

from hullmesh.config.settings import (
    MAX_INDEXED_POINTS,
    GeometryConfig,
    HullmeshSettings,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "MAX_INDEXED_POINTS",
    "GeometryConfig",
    "HullmeshSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "get_default_settings",
]
