"""Geodesy helpers for geographic (longitude, latitude) coordinates.

Areas are measured in an equal-area projection of the WGS84 ellipsoid, and
circle vertices and drag distances follow WGS84 geodesics. Both come from
pyproj.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import shapely
from pyproj import Geod, Transformer
from shapely.geometry.base import BaseGeometry

GEOGRAPHIC_CRS = "EPSG:4326"
# WGS 84 / NSIDC EASE-Grid 2.0 Global, cylindrical equal-area in meters
EQUAL_AREA_CRS = "EPSG:6933"

WGS84 = Geod(ellps="WGS84")
_TO_EQUAL_AREA = Transformer.from_crs(GEOGRAPHIC_CRS, EQUAL_AREA_CRS, always_xy=True)


def equal_area_projection(geometry: BaseGeometry) -> BaseGeometry:
    """Project (lon, lat) degrees into the equal-area CRS.

    Planar areas measured on the result are ellipsoidal areas in square meters.
    """
    def _project(coords: np.ndarray) -> np.ndarray:
        x, y = _TO_EQUAL_AREA.transform(coords[:, 0], coords[:, 1])
        return np.column_stack([x, y])

    return shapely.transform(geometry, _project)


def destination_points(
    center: Tuple[float, float],
    distance: float,
    bearings: np.ndarray,
) -> np.ndarray:
    """Points reached from ``center`` after ``distance`` meters along each bearing.

    Args:
        center: (lon, lat) in degrees
        distance: Geodesic distance in meters
        bearings: Azimuths in degrees, clockwise from north

    Returns:
        Nx2 array of (lon, lat) in degrees
    """
    azimuths = np.asarray(bearings, dtype=float)
    lons = np.full(azimuths.shape, float(center[0]))
    lats = np.full(azimuths.shape, float(center[1]))
    distances = np.full(azimuths.shape, float(distance))
    lon2, lat2, _ = WGS84.fwd(lons, lats, azimuths, distances)
    return np.column_stack([lon2, lat2])


def geodesic_distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """WGS84 geodesic distance in meters between two (lon, lat) points."""
    _, _, distance = WGS84.inv(a[0], a[1], b[0], b[1])
    return float(distance)


__all__ = [
    "WGS84",
    "EQUAL_AREA_CRS",
    "equal_area_projection",
    "destination_points",
    "geodesic_distance",
]
