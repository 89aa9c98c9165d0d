"""Configuration settings for ttf2dxf."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# Smallest raster line scale accepted; lower requests are raised to this
MIN_LINE_SCALE = 24


class OutputMode(str, Enum):
    """How glyphs are arranged in the drawing."""

    FONT = "font"
    TEXT = "text"


class FlattenConfig(BaseModel):
    """Configuration for curve flattening into biarcs.

    Lengths are in output units (see OutputConfig.units_per_em).
    """

    estimation_steps: int = Field(
        default=100,
        ge=1,
        le=100_000,
        description="Linear samples per curve for length estimation and extents",
    )
    arc_length_per_pair: float = Field(
        default=200.0,
        gt=0.0,
        description="Approximate curve length covered by one biarc (minimum two per curve)",
    )


class RasterConfig(BaseModel):
    """Configuration for the optional scanline raster tracing."""

    line_scale: int | None = Field(
        default=None,
        description="Raster rows per em (None disables raster tracing)",
    )

    @field_validator("line_scale")
    @classmethod
    def _clamp_line_scale(cls, value: int | None) -> int | None:
        if value is None:
            return None
        return max(value, MIN_LINE_SCALE)

    @property
    def enabled(self) -> bool:
        """Whether raster tracing is switched on."""
        return self.line_scale is not None


class OutputConfig(BaseModel):
    """Configuration for the DXF drawing."""

    mode: OutputMode = Field(
        default=OutputMode.FONT,
        description="font: one layer per glyph with metrics; text: lay out text on one layer",
    )
    layer: str | None = Field(
        default=None,
        description="Fixed layer name (overrides per-glyph layers)",
    )
    units_per_em: int | None = Field(
        default=4096,
        ge=16,
        description="Output units per em (None keeps the font's design units)",
    )
    first_char: int = Field(
        default=0x20,
        ge=0,
        le=0x10FFFF,
        description="First code point rendered in font mode",
    )
    last_char: int = Field(
        default=0x7E,
        ge=0,
        le=0x10FFFF,
        description="Last code point rendered in font mode",
    )
    dxf_version: str = Field(
        default="R2000",
        description="DXF version of the drawing (LWPOLYLINE needs R2000 or later)",
    )

    def scale_for(self, font_upm: int) -> float:
        """Get the factor from font design units to output units.

        Args:
            font_upm: The font's units per em

        Returns:
            Scale factor (1.0 when design units are kept)
        """
        if self.units_per_em is None:
            return 1.0
        return self.units_per_em / font_upm


class ProcessingConfig(BaseModel):
    """Configuration for font processing."""

    strict: bool = Field(
        default=False,
        description="Abort on the first glyph render error instead of skipping it",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class Ttf2DxfSettings(BaseModel):
    """Main application settings."""

    flatten: FlattenConfig = Field(default_factory=FlattenConfig)
    raster: RasterConfig = Field(default_factory=RasterConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> Ttf2DxfSettings:
    """Get default application settings."""
    return Ttf2DxfSettings()
