"""Tests for quota and tolerance configuration."""

import pytest

from drawforge import ConfigurationError, ResolutionConfig, ShapeCategory, ShapeConfig


class TestShapeConfig:
    """Tests for ShapeConfig."""

    def test_defaults(self):
        config = ShapeConfig()
        assert config.limit_for(ShapeCategory.CIRCLE) == 10
        assert config.limit_for(ShapeCategory.RECTANGLE) == 10
        assert config.limit_for(ShapeCategory.POLYGON) == 10
        assert config.limit_for(ShapeCategory.LINESTRING) == 15

    def test_from_mapping_keeps_missing_defaults(self):
        config = ShapeConfig.from_mapping({"circle": 2, ShapeCategory.LINESTRING: 4})
        assert config.circle == 2
        assert config.linestring == 4
        assert config.polygon == 10

    def test_unknown_category(self):
        with pytest.raises(ConfigurationError, match="hexagon"):
            ShapeConfig.from_mapping({"hexagon": 1})

    @pytest.mark.parametrize("value", [-1, 1.5, "3", True])
    def test_bad_limits(self, value):
        with pytest.raises(ConfigurationError):
            ShapeConfig(circle=value)


class TestResolutionConfig:
    """Tests for ResolutionConfig."""

    def test_defaults(self):
        config = ResolutionConfig()
        assert config.enclosure_tolerance == 0.01
        assert config.min_area == 1.0
        assert config.circle_steps == 64

    @pytest.mark.parametrize("kwargs", [
        {"enclosure_tolerance": -0.1},
        {"min_area": float("nan")},
        {"circle_steps": 2},
        {"circle_steps": 8.0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            ResolutionConfig(**kwargs)
