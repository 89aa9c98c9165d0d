"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from ttf2dxf.config import (
    MIN_LINE_SCALE,
    FlattenConfig,
    OutputConfig,
    OutputMode,
    RasterConfig,
    Ttf2DxfSettings,
    get_default_settings,
)


class TestFlattenConfig:
    """Tests for FlattenConfig."""

    def test_defaults(self):
        config = FlattenConfig()
        assert config.estimation_steps == 100
        assert config.arc_length_per_pair == 200.0

    def test_arc_length_must_be_positive(self):
        with pytest.raises(ValidationError):
            FlattenConfig(arc_length_per_pair=0)

    def test_estimation_steps_must_be_positive(self):
        with pytest.raises(ValidationError):
            FlattenConfig(estimation_steps=0)


class TestRasterConfig:
    """Tests for RasterConfig."""

    def test_disabled_by_default(self):
        config = RasterConfig()
        assert config.line_scale is None
        assert not config.enabled

    def test_small_line_scale_is_raised(self):
        assert RasterConfig(line_scale=4).line_scale == MIN_LINE_SCALE

    def test_line_scale_kept(self):
        config = RasterConfig(line_scale=64)
        assert config.line_scale == 64
        assert config.enabled


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_defaults(self):
        config = OutputConfig()
        assert config.mode == OutputMode.FONT
        assert config.layer is None
        assert config.units_per_em == 4096
        assert (config.first_char, config.last_char) == (0x20, 0x7E)

    def test_scale_for(self):
        assert OutputConfig().scale_for(1000) == pytest.approx(4.096)
        assert OutputConfig().scale_for(2048) == 2.0
        assert OutputConfig(units_per_em=1000).scale_for(1000) == 1.0

    def test_design_units(self):
        assert OutputConfig(units_per_em=None).scale_for(2048) == 1.0

    def test_units_per_em_lower_bound(self):
        with pytest.raises(ValidationError):
            OutputConfig(units_per_em=8)

    def test_mode_from_string(self):
        assert OutputConfig(mode="text").mode == OutputMode.TEXT


class TestSettings:
    """Tests for the top-level settings."""

    def test_default_settings(self):
        settings = get_default_settings()
        assert isinstance(settings, Ttf2DxfSettings)
        assert settings.processing.strict is False
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"
