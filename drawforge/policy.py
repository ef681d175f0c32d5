"""Acceptance policy for newly drawn shapes.

One drawing action goes Idle -> Pending(candidate) -> Accepted | Rejected.
The checks run in a fixed order:

1. quota for the category
2. point count / shape validation
3. line strings are accepted here, they never take part in overlap logic
4. enclosure by an existing polygonal feature
5. trimming against overlapping features
6. the candidate as drawn when nothing overlaps

The existing features are a read-only snapshot; the caller appends the
accepted feature to its own collection.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional, Sequence, Union

from shapely.geometry import LineString, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from .config import (
    DEFAULT_RESOLUTION_CONFIG,
    DEFAULT_SHAPE_CONFIG,
    ResolutionConfig,
    ShapeConfig,
)
from .core.errors import InsufficientPointsError, InvalidShapeError, ValidationError
from .core.geometry_utils import (
    GeometryLike,
    as_geometry,
    distinct_point_count,
    raw_point_count,
)
from .core.types import Decision, RejectionKind, ShapeCategory
from .features import Feature, count_by_type, iso_timestamp
from .overlap import classify_overlaps, trim_overlaps
from .shapes import ShapeInput, synthesize

logger = logging.getLogger(__name__)

ENCLOSED_MESSAGE = "Cannot create polygon that is fully enclosed by another polygon"
REMOVED_MESSAGE = "Polygon was completely overlapped and removed"
GENERIC_MESSAGE = "Unable to process shape"


@dataclass(frozen=True)
class Accepted:
    """The shape was accepted; ``feature`` should be appended to the collection."""

    feature: Feature
    trimmed: bool = False

    @property
    def decision(self) -> Decision:
        return Decision.TRIMMED if self.trimmed else Decision.ACCEPTED


@dataclass(frozen=True)
class Rejected:
    """The shape was discarded; ``reason`` is shown to the user."""

    reason: str
    kind: RejectionKind

    @property
    def decision(self) -> Decision:
        return Decision.REJECTED


Resolution = Union[Accepted, Rejected]


def resolve_candidate(
    candidate: GeometryLike,
    category: Union[ShapeCategory, str],
    existing_features: Sequence[Feature],
    shape_config: Optional[ShapeConfig] = None,
    config: Optional[ResolutionConfig] = None,
    now: Optional[datetime] = None,
) -> Resolution:
    """Decide whether a finished candidate geometry becomes a feature.

    Args:
        candidate: Polygon/MultiPolygon (LineString for lines), shapely or GeoJSON
        category: Drawing tool that produced the candidate
        existing_features: Snapshot of accepted features, in insertion order
        shape_config: Per-category quotas
        config: Engine tolerances
        now: Creation time for the new feature (defaults to the current time)

    Returns:
        Accepted or Rejected. Never raises for geometry problems.

    Examples:
        >>> triangle = Polygon([(0, 0), (0.01, 0), (0, 0.01)])
        >>> resolution = resolve_candidate(triangle, "polygon", [])
        >>> resolution.feature.name
        'Polygon 1'
    """
    try:
        category = ShapeCategory(category)
    except ValueError:
        return Rejected(f"Unknown shape category: {category!r}", RejectionKind.INVALID_SHAPE)
    shape_config = shape_config or DEFAULT_SHAPE_CONFIG
    config = config or DEFAULT_RESOLUTION_CONFIG

    quota = _check_quota(category, existing_features, shape_config)
    if quota is not None:
        return quota

    try:
        if isinstance(candidate, Mapping):
            _check_raw_coordinates(category, candidate)
        geometry = as_geometry(candidate)
        _check_candidate(category, geometry)
        return _resolve(geometry, category, existing_features, config, now)
    except ValidationError as exc:
        return _validation_rejection(exc)
    except Exception:
        logger.exception("Unexpected failure while resolving %s candidate", category.value)
        return Rejected(GENERIC_MESSAGE, RejectionKind.GEOMETRY_ERROR)


def resolve_shape(
    shape: ShapeInput,
    existing_features: Sequence[Feature],
    shape_config: Optional[ShapeConfig] = None,
    config: Optional[ResolutionConfig] = None,
    now: Optional[datetime] = None,
) -> Resolution:
    """Synthesize a drawing input and resolve it like :func:`resolve_candidate`."""
    category = shape.category
    shape_config = shape_config or DEFAULT_SHAPE_CONFIG
    config = config or DEFAULT_RESOLUTION_CONFIG

    quota = _check_quota(category, existing_features, shape_config)
    if quota is not None:
        return quota

    try:
        geometry = synthesize(shape, config)
        return _resolve(geometry, category, existing_features, config, now)
    except ValidationError as exc:
        return _validation_rejection(exc)
    except Exception:
        logger.exception("Unexpected failure while resolving %s shape", category.value)
        return Rejected(GENERIC_MESSAGE, RejectionKind.GEOMETRY_ERROR)


def build_feature(
    category: ShapeCategory,
    geometry: BaseGeometry,
    existing_features: Sequence[Feature],
    now: Optional[datetime] = None,
) -> Feature:
    """Create the record for an accepted geometry.

    The id is the category plus the creation time in epoch milliseconds,
    with a numeric suffix if the snapshot already holds that id.
    """
    if now is None:
        millis = time.time_ns() // 1_000_000
        now = datetime.fromtimestamp(millis / 1000.0, tz=timezone.utc)
    else:
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        millis = int(now.timestamp() * 1000)

    base_id = f"{category.value}-{millis}"
    taken = {f.id for f in existing_features}
    feature_id = base_id
    suffix = 2
    while feature_id in taken:
        feature_id = f"{base_id}-{suffix}"
        suffix += 1

    ordinal = count_by_type(existing_features, category) + 1
    return Feature(
        id=feature_id,
        category=category,
        geometry=geometry,
        name=f"{category.label} {ordinal}",
        created_at=iso_timestamp(now),
    )


def _check_quota(
    category: ShapeCategory,
    existing_features: Sequence[Feature],
    shape_config: ShapeConfig,
) -> Optional[Rejected]:
    limit = shape_config.limit_for(category)
    if count_by_type(existing_features, category) >= limit:
        logger.info("Quota reached for %s (%d)", category.value, limit)
        return Rejected(
            f"Maximum {limit} {category.plural} allowed",
            RejectionKind.QUOTA_EXCEEDED,
        )
    return None


def _check_raw_coordinates(category: ShapeCategory, candidate: Mapping) -> None:
    """Point-count check on GeoJSON coordinates, before shapely pads or rejects them."""
    count = raw_point_count(candidate)
    if count is None:
        return
    if category.is_polygonal and candidate.get("type") in ("Polygon", "MultiPolygon"):
        if count < 3:
            raise InsufficientPointsError(ShapeCategory.POLYGON, 3, count)
    elif not category.is_polygonal and candidate.get("type") == "LineString":
        if count < category.min_points:
            raise InsufficientPointsError(category, category.min_points, count)


def _check_candidate(category: ShapeCategory, geometry: BaseGeometry) -> None:
    """Point-count and type checks for a ready-made candidate geometry."""
    if category.is_polygonal:
        if isinstance(geometry, Polygon):
            shells = [geometry.exterior]
        elif isinstance(geometry, MultiPolygon):
            shells = [p.exterior for p in geometry.geoms]
        else:
            raise InvalidShapeError(
                f"{category.label} needs a Polygon or MultiPolygon, got {geometry.geom_type}"
            )
        if not shells or any(
            distinct_point_count(list(shell.coords)) < 3 for shell in shells
        ):
            raise InsufficientPointsError(ShapeCategory.POLYGON, 3, _smallest_shell(shells))
    else:
        if not isinstance(geometry, LineString):
            raise InvalidShapeError(
                f"{category.label} needs a LineString, got {geometry.geom_type}"
            )
        if len(geometry.coords) < category.min_points:
            raise InsufficientPointsError(category, category.min_points, len(geometry.coords))


def _smallest_shell(shells) -> int:
    if not shells:
        return 0
    return min(distinct_point_count(list(shell.coords)) for shell in shells)


def _resolve(
    geometry: BaseGeometry,
    category: ShapeCategory,
    existing_features: Sequence[Feature],
    config: ResolutionConfig,
    now: Optional[datetime],
) -> Resolution:
    if not category.is_polygonal:
        return Accepted(build_feature(category, geometry, existing_features, now))

    overlap = classify_overlaps(geometry, existing_features, config)
    if overlap.is_fully_enclosed:
        return Rejected(ENCLOSED_MESSAGE, RejectionKind.FULLY_ENCLOSED)

    if overlap.has_overlap:
        trim = trim_overlaps(geometry, overlap.overlapping_features, config)
        if trim.fully_removed:
            return Rejected(REMOVED_MESSAGE, RejectionKind.FULLY_OVERLAPPED)
        feature = build_feature(category, trim.geometry, existing_features, now)
        logger.debug(
            "Trimmed %s against %d feature(s)", feature.id, len(overlap.overlapping_features)
        )
        return Accepted(feature, trimmed=True)

    return Accepted(build_feature(category, geometry, existing_features, now))


def _validation_rejection(exc: ValidationError) -> Rejected:
    if isinstance(exc, InsufficientPointsError):
        return Rejected(str(exc), RejectionKind.INSUFFICIENT_POINTS)
    return Rejected(str(exc), RejectionKind.INVALID_SHAPE)


__all__ = [
    "Accepted",
    "Rejected",
    "Resolution",
    "resolve_candidate",
    "resolve_shape",
    "build_feature",
    "ENCLOSED_MESSAGE",
    "REMOVED_MESSAGE",
    "GENERIC_MESSAGE",
]
