"""GeoJSON FeatureCollection export and import."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from .core.errors import GeoJSONError
from .features import Feature


def to_feature_collection(features: Iterable[Feature]) -> Dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [feature.to_geojson() for feature in features],
    }


def export_to_geojson(features: Iterable[Feature], indent: int = 2) -> str:
    """Serialize features as a GeoJSON FeatureCollection string."""
    return json.dumps(to_feature_collection(features), indent=indent)


def write_geojson(features: Iterable[Feature], path: Union[str, Path]) -> Path:
    """Write the collection to ``path`` (usually ``features.geojson``)."""
    path = Path(path)
    path.write_text(export_to_geojson(features), encoding="utf-8")
    return path


def read_geojson(source: Union[str, Path]) -> List[Feature]:
    """Load features from a FeatureCollection file path or JSON text.

    Raises:
        GeoJSONError: Not JSON, not a FeatureCollection, or a bad feature
    """
    if isinstance(source, Path) or not source.lstrip().startswith("{"):
        text = Path(source).read_text(encoding="utf-8")
    else:
        text = source

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GeoJSONError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise GeoJSONError("Expected a GeoJSON FeatureCollection")

    return [Feature.from_geojson(item) for item in data.get("features", [])]


__all__ = [
    "to_feature_collection",
    "export_to_geojson",
    "write_geojson",
    "read_geojson",
]
