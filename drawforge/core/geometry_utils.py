"""Common geometry manipulation utilities.

Small helpers shared by the primitives adapter, the synthesizer and the
GeoJSON layer.
"""

from typing import Mapping, Optional, Sequence, Tuple, Union

import numpy as np
from shapely.geometry import GeometryCollection, MultiPolygon, Polygon, shape
from shapely.geometry.base import BaseGeometry

Position = Tuple[float, float]
GeometryLike = Union[BaseGeometry, Mapping]


def as_geometry(geometry: GeometryLike) -> BaseGeometry:
    """Return a shapely geometry for either a shapely object or a GeoJSON mapping.

    Examples:
        >>> geom = as_geometry({"type": "Point", "coordinates": [4.9, 52.37]})
        >>> geom.geom_type
        'Point'
    """
    if isinstance(geometry, BaseGeometry):
        return geometry
    return shape(geometry)


def polygonal_part(geometry: Optional[BaseGeometry]) -> Optional[BaseGeometry]:
    """Keep only the areal part of a boolean-operation result.

    Overlay results can contain lines and points where boundaries touch.
    Those pieces carry no area, so only Polygon pieces are kept. A single
    piece is returned as a Polygon, several as a MultiPolygon.

    Args:
        geometry: Result of intersection/difference (any type)

    Returns:
        Polygon or MultiPolygon with positive area, or None if nothing remains

    Examples:
        >>> a = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> b = Polygon([(1, 0), (2, 0), (2, 1), (1, 1)])
        >>> polygonal_part(a.intersection(b)) is None
        True
    """
    if geometry is None or geometry.is_empty:
        return None

    if isinstance(geometry, Polygon):
        polygons = [geometry]
    elif isinstance(geometry, MultiPolygon):
        polygons = list(geometry.geoms)
    elif isinstance(geometry, GeometryCollection):
        polygons = []
        for part in geometry.geoms:
            if isinstance(part, Polygon):
                polygons.append(part)
            elif isinstance(part, MultiPolygon):
                polygons.extend(part.geoms)
    else:
        return None

    polygons = [p for p in polygons if not p.is_empty and p.area > 0]
    if not polygons:
        return None
    if len(polygons) == 1:
        return polygons[0]
    return MultiPolygon(polygons)


def ensure_ring_closed(coords: np.ndarray) -> np.ndarray:
    """Ensure coordinate ring is closed by appending first point if needed.

    Args:
        coords: Coordinate array (Nx2)

    Returns:
        Coordinate array guaranteed to be closed

    Examples:
        >>> coords = np.array([[0, 0], [1, 0], [1, 1]])
        >>> len(ensure_ring_closed(coords))
        4
    """
    if len(coords) < 3:
        return coords

    if not np.array_equal(coords[0], coords[-1]):
        coords = np.vstack([coords, coords[0:1]])

    return coords


def distinct_point_count(points: Sequence[Sequence[float]]) -> int:
    """Number of distinct positions in ``points``.

    The closing point of a ring and any padding shapely adds to an
    under-filled ring are repeats, so they do not count.

    Examples:
        >>> distinct_point_count([(0, 0), (1, 0), (0, 0), (0, 0)])
        2
    """
    return len({tuple(float(c) for c in p[:2]) for p in points})


def raw_point_count(geometry: Mapping) -> Optional[int]:
    """Smallest point count among the rings or lines of a GeoJSON mapping.

    Polygon rings count distinct positions, line strings count positions.
    Returns None when the mapping's type has no point sequence to count.
    """
    kind = geometry.get("type")
    coordinates = geometry.get("coordinates")
    if coordinates is None:
        return None
    if kind == "LineString":
        return len(coordinates)
    if kind == "Polygon":
        shells = [coordinates[0]] if coordinates else [[]]
    elif kind == "MultiPolygon":
        shells = [rings[0] if rings else [] for rings in coordinates] or [[]]
    else:
        return None
    return min(distinct_point_count(shell) for shell in shells)


__all__ = [
    'Position',
    'GeometryLike',
    'as_geometry',
    'polygonal_part',
    'ensure_ring_closed',
    'distinct_point_count',
    'raw_point_count',
]
