"""Configuration management for florist.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Working grid limits
- MosaicConfig: Mosaic frame generation settings
- FlowerConfig: Flower and petal layer generation settings
- LoggingConfig: Logging settings
- FloristSettings: Main application settings
"""

from florist.config.settings import (
    Arrangement,
    FloristSettings,
    FlowerConfig,
    GeometryConfig,
    LoggingConfig,
    MosaicConfig,
    get_default_settings,
)

__all__ = [
    "Arrangement",
    "FloristSettings",
    "FlowerConfig",
    "GeometryConfig",
    "LoggingConfig",
    "MosaicConfig",
    "get_default_settings",
]
