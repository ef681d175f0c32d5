"""Turn finished drawing input into normalized geometries.

Each drawing tool produces one of the input variants below once the user has
finished the shape. :func:`synthesize` converts the variant into a shapely
geometry in (longitude, latitude) order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from shapely.geometry import LineString, Polygon
from shapely.geometry.base import BaseGeometry

from .config import DEFAULT_RESOLUTION_CONFIG, ResolutionConfig
from .core.errors import InsufficientPointsError, InvalidShapeError
from .core.geometry_utils import Position, distinct_point_count, ensure_ring_closed
from .core.types import ShapeCategory
from .geodesy import destination_points, geodesic_distance


@dataclass(frozen=True)
class CircleInput:
    """Circle given by its center (lon, lat) and radius in meters."""

    center: Position
    radius: float
    steps: Optional[int] = None

    category = ShapeCategory.CIRCLE

    @classmethod
    def from_edge_point(cls, center: Position, edge: Position, **kwargs) -> "CircleInput":
        """Circle through ``edge``, the point where the user released the drag."""
        return cls(center=center, radius=geodesic_distance(center, edge), **kwargs)


@dataclass(frozen=True)
class RectangleInput:
    """Axis-aligned rectangle spanned by two opposite corners."""

    corner_a: Position
    corner_b: Position

    category = ShapeCategory.RECTANGLE


@dataclass(frozen=True)
class PolygonInput:
    """Polygon from the ordered points the user clicked."""

    points: Tuple[Position, ...]

    category = ShapeCategory.POLYGON


@dataclass(frozen=True)
class LineStringInput:
    """Line from the ordered points the user clicked."""

    points: Tuple[Position, ...]

    category = ShapeCategory.LINESTRING


ShapeInput = Union[CircleInput, RectangleInput, PolygonInput, LineStringInput]


def synthesize(
    shape: ShapeInput,
    config: ResolutionConfig = DEFAULT_RESOLUTION_CONFIG,
) -> BaseGeometry:
    """Build the geometry for a finished drawing input.

    Circles without an explicit step count use ``config.circle_steps``.

    Raises:
        InsufficientPointsError: Fewer points than the category needs
        InvalidShapeError: Degenerate circle or rectangle
        TypeError: Unknown input variant

    Examples:
        >>> ring = synthesize(RectangleInput((1.0, 2.0), (0.0, 0.0)))
        >>> list(ring.exterior.coords)
        [(0.0, 0.0), (1.0, 0.0), (1.0, 2.0), (0.0, 2.0), (0.0, 0.0)]
    """
    if isinstance(shape, CircleInput):
        steps = shape.steps if shape.steps is not None else config.circle_steps
        return circle_polygon(shape.center, shape.radius, steps=steps)
    if isinstance(shape, RectangleInput):
        return rectangle_polygon(shape.corner_a, shape.corner_b)
    if isinstance(shape, PolygonInput):
        return closed_polygon(shape.points)
    if isinstance(shape, LineStringInput):
        return line_string(shape.points)
    raise TypeError(f"Unsupported shape input: {type(shape).__name__}")


def rectangle_polygon(corner_a: Position, corner_b: Position) -> Polygon:
    """Counter-clockwise ring SW, SE, NE, NW, SW through both corners."""
    _require_points(ShapeCategory.RECTANGLE, [corner_a, corner_b])
    west, east = sorted((corner_a[0], corner_b[0]))
    south, north = sorted((corner_a[1], corner_b[1]))
    if west == east or south == north:
        raise InvalidShapeError("Rectangle must have non-zero width and height")

    return Polygon([
        (west, south),
        (east, south),
        (east, north),
        (west, north),
        (west, south),
    ])


def circle_polygon(center: Position, radius: float, steps: int = 64) -> Polygon:
    """Approximate a circle as a regular polygon with ``steps`` vertices.

    Vertices are WGS84 geodesic destination points from the center, so edges have
    the same length on the ground regardless of latitude. Bearings step
    through ``-360 * i / steps``, which gives a counter-clockwise ring.
    """
    if center is None:
        raise InsufficientPointsError(ShapeCategory.CIRCLE, 2, 0)
    if not math.isfinite(radius) or radius <= 0:
        raise InvalidShapeError("Circle radius must be a positive number of meters")
    if steps < 3:
        raise InvalidShapeError("Circle needs at least 3 steps")

    bearings = -360.0 * np.arange(steps) / steps
    coords = destination_points(center, radius, bearings)
    return Polygon(ensure_ring_closed(coords))


def closed_polygon(points: Sequence[Position]) -> Polygon:
    """Close the clicked points into a ring."""
    _require_points(ShapeCategory.POLYGON, points)
    coords = np.asarray(points, dtype=float)
    return Polygon(ensure_ring_closed(coords))


def line_string(points: Sequence[Position]) -> LineString:
    _require_points(ShapeCategory.LINESTRING, points)
    return LineString(points)


def _require_points(category: ShapeCategory, points: Sequence[Position]) -> None:
    points = [p for p in points if p is not None]
    count = distinct_point_count(points) if category is ShapeCategory.POLYGON else len(points)
    if count < category.min_points:
        raise InsufficientPointsError(category, category.min_points, count)


__all__ = [
    "CircleInput",
    "RectangleInput",
    "PolygonInput",
    "LineStringInput",
    "ShapeInput",
    "synthesize",
    "rectangle_polygon",
    "circle_polygon",
    "closed_polygon",
    "line_string",
]
