"""Tests for the FeatureStore collection owner."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

from shapely.geometry import Polygon

from drawforge import (
    Accepted,
    Decision,
    FeatureStore,
    LineStringInput,
    PolygonInput,
    RectangleInput,
    Rejected,
    RejectionKind,
    ShapeCategory,
    ShapeConfig,
)


def _square(x0: float, y0: float, size: float) -> Polygon:
    return Polygon([(x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size)])


class TestFeatureStore:
    """Tests for FeatureStore."""

    def test_accepted_shapes_are_appended(self):
        store = FeatureStore()
        store.submit(RectangleInput((0, 0), (1, 1)))
        store.submit(LineStringInput(((0, 0), (2, 2))))

        assert len(store) == 2
        assert [f.name for f in store.features] == ["Rectangle 1", "LineString 1"]

    def test_rejected_shapes_are_not_appended(self):
        store = FeatureStore()
        store.submit(RectangleInput((0, 0), (10, 10)))
        resolution = store.submit(RectangleInput((1, 1), (2, 2)))

        assert resolution.kind is RejectionKind.FULLY_ENCLOSED
        assert len(store) == 1

    def test_trimmed_shape_stored_trimmed(self):
        store = FeatureStore()
        store.submit(RectangleInput((-0.01, -0.01), (0.01, 0.03)))
        resolution = store.submit_geometry(_square(0, 0, 0.02), "polygon")

        assert resolution.decision is Decision.TRIMMED
        stored = store.features[-1]
        assert stored.geometry.equals(Polygon([(0.01, 0), (0.02, 0), (0.02, 0.02), (0.01, 0.02)]))

    def test_quota_uses_store_config(self):
        store = FeatureStore(shape_config=ShapeConfig(polygon=1))
        store.submit(PolygonInput(((0, 0), (1, 0), (0, 1))))
        resolution = store.submit(PolygonInput(((5, 5), (6, 5), (5, 6))))

        assert resolution.reason == "Maximum 1 polygons allowed"
        assert store.count_by_type(ShapeCategory.POLYGON) == 1

    def test_remove_and_clear(self):
        store = FeatureStore()
        first = store.submit(RectangleInput((0, 0), (1, 1))).feature
        store.submit(RectangleInput((5, 5), (6, 6)))

        assert store.remove(first.id)
        assert not store.remove(first.id)
        assert len(store) == 1
        assert store.count_by_type("rectangle") == 1

        store.clear()
        assert len(store) == 0

    def test_snapshot_is_detached(self):
        store = FeatureStore()
        store.submit(RectangleInput((0, 0), (1, 1)))
        snapshot = store.features
        store.submit(RectangleInput((5, 5), (6, 6)))
        assert len(snapshot) == 1

    def test_concurrent_submissions_are_serialized(self):
        """Identical shapes submitted at once: exactly one wins."""
        store = FeatureStore()
        shape = RectangleInput((0, 0), (1, 1))

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: store.submit(shape), range(8)))

        accepted = [r for r in results if isinstance(r, Accepted)]
        assert len(accepted) == 1
        assert len(store) == 1
        assert all(
            r.kind is RejectionKind.FULLY_ENCLOSED for r in results if isinstance(r, Rejected)
        )

    def test_seeded_features(self):
        store = FeatureStore()
        first = store.submit(RectangleInput((0, 0), (1, 1))).feature
        copy = FeatureStore(store.features)
        assert list(copy) == [first]

    def test_len_reads_under_lock(self):
        store = FeatureStore()
        store.submit(RectangleInput((0, 0), (1, 1)))
        store._lock = MagicMock()

        assert len(store) == 1
        store._lock.__enter__.assert_called_once()
