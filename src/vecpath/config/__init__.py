"""Configuration management for vecpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Stroke, arc sampling and degeneracy settings
- TriangulationConfig: Ear-clipping settings
- LoggingConfig: Logging settings
- VecPathSettings: Main application settings
"""

from vecpath.config.settings import (
    GeometryConfig,
    LoggingConfig,
    TriangulationConfig,
    VecPathSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "TriangulationConfig",
    "VecPathSettings",
    "get_default_settings",
]
