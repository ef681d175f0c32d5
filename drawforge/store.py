"""In-memory owner of the accepted feature collection."""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Iterable, List, Optional, Tuple, Union

from .config import DEFAULT_RESOLUTION_CONFIG, DEFAULT_SHAPE_CONFIG, ResolutionConfig, ShapeConfig
from .core.geometry_utils import GeometryLike
from .core.types import ShapeCategory
from .features import Feature, count_by_type
from .policy import Accepted, Resolution, resolve_candidate, resolve_shape
from .shapes import ShapeInput

logger = logging.getLogger(__name__)


class FeatureStore:
    """
    Ordered collection of accepted features.

    The store is the single writer for its collection: ``submit`` resolves a
    shape against a snapshot and appends the result while holding a lock, so
    concurrent submissions never resolve against a stale snapshot.

    Example:
        ```python
        store = FeatureStore(shape_config=ShapeConfig(rectangle=2))
        resolution = store.submit(RectangleInput((4.89, 52.37), (4.90, 52.38)))
        if resolution.decision is Decision.REJECTED:
            print(resolution.reason)
        ```
    """

    def __init__(
        self,
        features: Iterable[Feature] = (),
        shape_config: ShapeConfig = DEFAULT_SHAPE_CONFIG,
        config: ResolutionConfig = DEFAULT_RESOLUTION_CONFIG,
    ):
        self.shape_config = shape_config
        self.config = config
        self._features: List[Feature] = list(features)
        self._lock = threading.Lock()

    @property
    def features(self) -> Tuple[Feature, ...]:
        """Snapshot of the collection in insertion order."""
        with self._lock:
            return tuple(self._features)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self):
        return iter(self.features)

    def add(self, feature: Feature) -> None:
        """Append a feature without running the acceptance policy."""
        with self._lock:
            self._features.append(feature)

    def remove(self, feature_id: str) -> bool:
        """Remove the feature with ``feature_id``; returns False if absent."""
        with self._lock:
            before = len(self._features)
            self._features = [f for f in self._features if f.id != feature_id]
            return len(self._features) != before

    def clear(self) -> None:
        with self._lock:
            self._features = []

    def count_by_type(self, category: Union[ShapeCategory, str]) -> int:
        with self._lock:
            return count_by_type(self._features, category)

    def submit(self, shape: ShapeInput, now: Optional[datetime] = None) -> Resolution:
        """Resolve a drawing input and append it when accepted."""
        with self._lock:
            resolution = resolve_shape(
                shape, tuple(self._features), self.shape_config, self.config, now
            )
            self._commit(resolution)
        return resolution

    def submit_geometry(
        self,
        geometry: GeometryLike,
        category: Union[ShapeCategory, str],
        now: Optional[datetime] = None,
    ) -> Resolution:
        """Resolve a ready-made candidate geometry and append it when accepted."""
        with self._lock:
            resolution = resolve_candidate(
                geometry, category, tuple(self._features), self.shape_config, self.config, now
            )
            self._commit(resolution)
        return resolution

    def _commit(self, resolution: Resolution) -> None:
        if isinstance(resolution, Accepted):
            self._features.append(resolution.feature)
            logger.info("Added %s (%s)", resolution.feature.name, resolution.decision.value)
        else:
            logger.info("Rejected shape: %s", resolution.reason)


__all__ = ["FeatureStore"]
