"""Configuration management for strokefont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Drawing surface geometry
- AutoScaleConfig: Per-class target sizes for auto-scaling
- StrokeConfig: Ribbon construction settings
- FontConfig: Font metrics and mandatory glyphs
- ProcessingConfig: Synthesis run settings
- LoggingConfig: Logging settings
- FontMetadata: Naming and generation options for one font
- StrokeFontSettings: Main application settings
"""

from strokefont.config.settings import (
    AutoScaleConfig,
    CanvasConfig,
    FontConfig,
    FontMetadata,
    LoggingConfig,
    ProcessingConfig,
    StrokeConfig,
    StrokeFontSettings,
)

__all__ = [
    "AutoScaleConfig",
    "CanvasConfig",
    "FontConfig",
    "FontMetadata",
    "LoggingConfig",
    "ProcessingConfig",
    "StrokeConfig",
    "StrokeFontSettings",
]
