"""Configuration management for dxfview.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- DisplayConfig: Colors, padding and grid settings
- CanvasConfig: Output canvas size and pixel ratio
- MeasureConfig: Snapping radius and distance units
- LoggingConfig: Logging settings
- ViewerSettings: Main application settings
"""

from dxfview.config.settings import (
    CanvasConfig,
    DisplayConfig,
    LoggingConfig,
    MeasureConfig,
    ViewerSettings,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "DisplayConfig",
    "LoggingConfig",
    "MeasureConfig",
    "ViewerSettings",
    "get_default_settings",
]
