"""Feature records kept in the drawing collection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from shapely.geometry import mapping
from shapely.geometry.base import BaseGeometry

from .core.errors import GeoJSONError
from .core.geometry_utils import as_geometry
from .core.types import ShapeCategory


@dataclass(frozen=True)
class Feature:
    """An accepted shape.

    Attributes:
        id: Stable identifier, ``"<category>-<epoch ms>"`` for engine output
        category: Drawing tool that produced the shape
        geometry: Shapely geometry in (lon, lat) order
        name: Display name such as ``"Polygon 2"``
        created_at: ISO-8601 UTC timestamp
    """

    id: str
    category: ShapeCategory
    geometry: BaseGeometry
    name: str
    created_at: str

    @property
    def is_polygonal(self) -> bool:
        return self.category.is_polygonal

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "id": self.id,
            "geometry": mapping(self.geometry),
            "properties": {
                "type": self.category.value,
                "name": self.name,
                "createdAt": self.created_at,
            },
        }

    @classmethod
    def from_geojson(cls, data: Mapping[str, Any]) -> "Feature":
        """Read a feature written by :meth:`to_geojson`.

        Raises:
            GeoJSONError: Missing id/geometry/type or an unknown category
        """
        if not isinstance(data, Mapping):
            raise GeoJSONError(f"Expected a GeoJSON Feature object, got {type(data).__name__}")
        if data.get("type") != "Feature":
            raise GeoJSONError(f"Expected a GeoJSON Feature, got {data.get('type')!r}")
        properties = data.get("properties") or {}
        if not isinstance(properties, Mapping):
            raise GeoJSONError("Feature properties must be an object")
        try:
            category = ShapeCategory(properties.get("type"))
        except ValueError:
            raise GeoJSONError(
                f"Unknown feature type: {properties.get('type')!r}"
            ) from None

        if data.get("id") is None or data.get("geometry") is None:
            raise GeoJSONError("Feature needs both an id and a geometry")
        try:
            geometry = as_geometry(data["geometry"])
        except Exception as exc:
            raise GeoJSONError(f"Invalid geometry for feature {data['id']!r}: {exc}") from exc

        return cls(
            id=str(data["id"]),
            category=category,
            geometry=geometry,
            name=properties.get("name") or "",
            created_at=properties.get("createdAt") or "",
        )


def count_by_type(features: Iterable[Feature], category: Union[ShapeCategory, str]) -> int:
    """Number of features of ``category``."""
    category = ShapeCategory(category)
    return sum(1 for f in features if f.category is category)


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision, e.g. ``2024-05-01T12:00:00.000Z``."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = [
    "Feature",
    "count_by_type",
    "iso_timestamp",
]
