"""Configuration management for ttf2dxf.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FlattenConfig: Curve-to-biarc subdivision settings
- RasterConfig: Scanline raster tracing settings
- OutputConfig: Drawing layout and units
- ProcessingConfig: Font processing settings
- LoggingConfig: Logging settings
- Ttf2DxfSettings: Main application settings
"""

from ttf2dxf.config.settings import (
    MIN_LINE_SCALE,
    FlattenConfig,
    LoggingConfig,
    OutputConfig,
    OutputMode,
    ProcessingConfig,
    RasterConfig,
    Ttf2DxfSettings,
    get_default_settings,
)

__all__ = [
    "MIN_LINE_SCALE",
    "FlattenConfig",
    "LoggingConfig",
    "OutputConfig",
    "OutputMode",
    "ProcessingConfig",
    "RasterConfig",
    "Ttf2DxfSettings",
    "get_default_settings",
]
