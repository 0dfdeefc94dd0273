"""Configuration management for svg2polylines.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FlattenConfig: Curve flattening settings (tolerance, depth cap)
- ProcessingConfig: Document processing settings
- LoggingConfig: Logging settings
- Svg2PolylinesSettings: Main application settings
"""

from svg2polylines.config.settings import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_TOLERANCE,
    FlattenConfig,
    LoggingConfig,
    ProcessingConfig,
    Svg2PolylinesSettings,
    get_default_settings,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_TOLERANCE",
    "FlattenConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "Svg2PolylinesSettings",
    "get_default_settings",
]
