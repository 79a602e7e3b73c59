"""Configuration management for nibblefont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- OutputConfig: Encoded font output settings
- LoggingConfig: Logging settings
- NibbleFontSettings: Main application settings
"""

from nibblefont.config.settings import (
    LoggingConfig,
    NibbleFontSettings,
    OutputConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "NibbleFontSettings",
    "OutputConfig",
    "get_default_settings",
]
