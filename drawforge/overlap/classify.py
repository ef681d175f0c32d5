"""Classify how a candidate polygon relates to existing features."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from shapely.geometry.base import BaseGeometry

from ..config import DEFAULT_RESOLUTION_CONFIG, ResolutionConfig
from ..features import Feature
from ..ops import area, attempt, intersection, within

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverlapResult:
    """Overlap relationships between a candidate and the existing features.

    Attributes:
        has_overlap: At least one existing feature shares area with the candidate
        is_fully_enclosed: An existing feature encloses the candidate
        overlapping_features: Overlapping features in discovery order
        enclosing_feature: Feature that stopped the scan, if any
        faulted_features: Features whose comparison raised in the geometry library
    """

    has_overlap: bool
    is_fully_enclosed: bool
    overlapping_features: Tuple[Feature, ...] = ()
    enclosing_feature: Optional[Feature] = None
    faulted_features: Tuple[Feature, ...] = ()


def polygonal_features(features: Iterable[Feature]) -> List[Feature]:
    """Drop line features; they never take part in overlap logic."""
    return [f for f in features if f.is_polygonal]


def classify_overlaps(
    candidate: BaseGeometry,
    existing_features: Iterable[Feature],
    config: ResolutionConfig = DEFAULT_RESOLUTION_CONFIG,
) -> OverlapResult:
    """Scan existing polygonal features in order and classify the candidate.

    For each feature the intersection is recorded as an overlap. The scan
    stops at the first feature that encloses the candidate, either because
    the intersection area is within ``config.enclosure_tolerance`` of the
    candidate area or because the candidate is covered by the feature.

    A fault in the geometry library for one feature is logged and that
    feature is treated as not overlapping.

    Args:
        candidate: Candidate Polygon/MultiPolygon
        existing_features: Accepted features, in insertion order
        config: Tolerances

    Returns:
        OverlapResult
    """
    overlapping: List[Feature] = []
    faulted: List[Feature] = []
    enclosing: Optional[Feature] = None
    candidate_area: Optional[float] = None

    for feature in polygonal_features(existing_features):
        shared = attempt(intersection, candidate, feature.geometry)
        if shared.faulted:
            logger.warning(
                "Skipping overlap check against %s: %s", feature.id, shared.error
            )
            faulted.append(feature)
            continue

        if shared.ok:
            overlapping.append(feature)

            if candidate_area is None:
                candidate_area = area(candidate)
            shared_area = attempt(area, shared.value)
            if shared_area.faulted:
                logger.warning(
                    "Could not measure overlap with %s: %s", feature.id, shared_area.error
                )
            elif abs(candidate_area - shared_area.value) < config.enclosure_tolerance:
                enclosing = feature
                break

        covered = attempt(within, candidate, feature.geometry)
        if covered.faulted:
            logger.warning(
                "Skipping containment check against %s: %s", feature.id, covered.error
            )
        elif covered.value:
            enclosing = feature
            break

    if enclosing is not None:
        logger.debug("Candidate is enclosed by %s", enclosing.id)

    return OverlapResult(
        has_overlap=bool(overlapping),
        is_fully_enclosed=enclosing is not None,
        overlapping_features=tuple(overlapping),
        enclosing_feature=enclosing,
        faulted_features=tuple(faulted),
    )


__all__ = [
    "OverlapResult",
    "polygonal_features",
    "classify_overlaps",
]
