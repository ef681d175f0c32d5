"""Subtract overlapping features from a candidate polygon."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from shapely.geometry.base import BaseGeometry

from ..config import DEFAULT_RESOLUTION_CONFIG, ResolutionConfig
from ..features import Feature
from ..ops import area, attempt, difference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrimResult:
    """Remainder of a candidate after trimming.

    ``geometry`` is None when the candidate was removed entirely.
    """

    geometry: Optional[BaseGeometry]
    skipped_features: Tuple[Feature, ...] = ()

    @property
    def fully_removed(self) -> bool:
        return self.geometry is None


def trim_overlaps(
    candidate: BaseGeometry,
    overlapping_features: Iterable[Feature],
    config: ResolutionConfig = DEFAULT_RESOLUTION_CONFIG,
) -> TrimResult:
    """Subtract each overlapping feature from the candidate, in order.

    The remainder shrinks with every step. An empty difference ends the
    process with full removal. A difference the geometry library cannot
    compute is logged and skipped, leaving the remainder unchanged. A final
    remainder below ``config.min_area`` square meters is treated as a sliver
    and also counts as full removal.

    Args:
        candidate: Candidate Polygon/MultiPolygon
        overlapping_features: Features found by :func:`classify_overlaps`
        config: Tolerances

    Returns:
        TrimResult
    """
    remainder = candidate
    skipped: List[Feature] = []

    for feature in overlapping_features:
        result = attempt(difference, remainder, feature.geometry)
        if result.faulted:
            logger.warning("Could not subtract %s: %s", feature.id, result.error)
            skipped.append(feature)
            continue
        if result.empty:
            logger.debug("Candidate consumed by %s", feature.id)
            return TrimResult(None, tuple(skipped))
        remainder = result.value

    remaining_area = area(remainder)
    if remaining_area < config.min_area:
        logger.debug("Discarding %.3f m² sliver left after trimming", remaining_area)
        return TrimResult(None, tuple(skipped))

    return TrimResult(remainder, tuple(skipped))


__all__ = [
    "TrimResult",
    "trim_overlaps",
]
