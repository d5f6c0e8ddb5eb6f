"""Configuration management for loopcorner.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CornerConfig: Angular tolerance for quite-sharp/quite-dull corners
- LoggingConfig: Logging settings
- LoopCornerSettings: Main application settings
"""

from loopcorner.config.settings import (
    CornerConfig,
    LoggingConfig,
    LoopCornerSettings,
    get_default_settings,
)

__all__ = [
    "CornerConfig",
    "LoggingConfig",
    "LoopCornerSettings",
    "get_default_settings",
]
