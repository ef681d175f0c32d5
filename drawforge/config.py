"""Quota and tolerance settings for the overlap engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Mapping, Union

from .core.errors import ConfigurationError
from .core.types import ShapeCategory


@dataclass(frozen=True)
class ShapeConfig:
    """Maximum number of features allowed per category.

    Examples:
        >>> config = ShapeConfig.from_mapping({"rectangle": 3})
        >>> config.limit_for(ShapeCategory.RECTANGLE)
        3
        >>> config.limit_for("linestring")
        15
    """

    circle: int = 10
    rectangle: int = 10
    polygon: int = 10
    linestring: int = 15

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(
                    f"Limit for {f.name} must be a non-negative integer, got {value!r}"
                )

    def limit_for(self, category: Union[ShapeCategory, str]) -> int:
        return getattr(self, ShapeCategory(category).value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Union[ShapeCategory, str], int]) -> "ShapeConfig":
        """Build a config from ``{category: limit}``; missing categories keep defaults."""
        limits = {}
        for key, value in mapping.items():
            try:
                category = ShapeCategory(key)
            except ValueError:
                raise ConfigurationError(f"Unknown shape category: {key!r}") from None
            limits[category.value] = value
        return cls(**limits)


@dataclass(frozen=True)
class ResolutionConfig:
    """Tolerances used by the classifier, the trim resolver and the synthesizer.

    Attributes:
        enclosure_tolerance: Max difference (m²) between intersection area and
            candidate area for the candidate to count as enclosed
        min_area: Remainders smaller than this (m²) count as fully removed
        circle_steps: Number of vertices used to approximate a circle
    """

    enclosure_tolerance: float = 0.01
    min_area: float = 1.0
    circle_steps: int = 64

    def __post_init__(self):
        if not math.isfinite(self.enclosure_tolerance) or self.enclosure_tolerance < 0:
            raise ConfigurationError("enclosure_tolerance must be a finite value >= 0")
        if not math.isfinite(self.min_area) or self.min_area < 0:
            raise ConfigurationError("min_area must be a finite value >= 0")
        if isinstance(self.circle_steps, bool) or not isinstance(self.circle_steps, int) \
                or self.circle_steps < 3:
            raise ConfigurationError("circle_steps must be an integer >= 3")


DEFAULT_SHAPE_CONFIG = ShapeConfig()
DEFAULT_RESOLUTION_CONFIG = ResolutionConfig()


__all__ = [
    "ShapeConfig",
    "ResolutionConfig",
    "DEFAULT_SHAPE_CONFIG",
    "DEFAULT_RESOLUTION_CONFIG",
]
