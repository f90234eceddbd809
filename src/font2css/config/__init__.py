"""Configuration management for font2css.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SynthesizerConfig: @font-face synthesis settings (external dest)
- OutputConfig: Input reading and stylesheet output settings
- LogLevel: Accepted logging levels
- LoggingConfig: Logging settings
- Font2CssSettings: Main application settings
"""

from font2css.config.settings import (
    Font2CssSettings,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    SynthesizerConfig,
    get_default_settings,
)

__all__ = [
    "Font2CssSettings",
    "LogLevel",
    "LoggingConfig",
    "OutputConfig",
    "SynthesizerConfig",
    "get_default_settings",
]
