"""Tests for the shape synthesizer."""

import math

import pytest
from shapely.geometry import LineString, Polygon

from drawforge.config import ResolutionConfig
from drawforge.core import InsufficientPointsError, InvalidShapeError, ShapeCategory
from drawforge.geodesy import geodesic_distance
from drawforge.ops import area
from drawforge.shapes import (
    CircleInput,
    LineStringInput,
    PolygonInput,
    RectangleInput,
    circle_polygon,
    synthesize,
)


class TestRectangle:
    """Tests for rectangle synthesis."""

    def test_ring_order_is_sw_se_ne_nw(self):
        rect = synthesize(RectangleInput((4.0, 52.0), (5.0, 53.0)))
        assert list(rect.exterior.coords) == [
            (4.0, 52.0), (5.0, 52.0), (5.0, 53.0), (4.0, 53.0), (4.0, 52.0),
        ]

    def test_corner_order_does_not_matter(self):
        a = synthesize(RectangleInput((5.0, 52.0), (4.0, 53.0)))
        b = synthesize(RectangleInput((4.0, 53.0), (5.0, 52.0)))
        assert list(a.exterior.coords) == list(b.exterior.coords)

    def test_counter_clockwise(self):
        rect = synthesize(RectangleInput((1.0, 1.0), (0.0, 0.0)))
        assert rect.exterior.is_ccw

    def test_flat_rectangle_rejected(self):
        with pytest.raises(InvalidShapeError):
            synthesize(RectangleInput((0.0, 0.0), (1.0, 0.0)))

    def test_missing_corner(self):
        with pytest.raises(InsufficientPointsError, match="Rectangle must have at least 2 points"):
            synthesize(RectangleInput((0.0, 0.0), None))


class TestCircle:
    """Tests for circle synthesis."""

    def test_default_step_count(self):
        circle = synthesize(CircleInput((4.9, 52.37), 500.0))
        coords = list(circle.exterior.coords)
        assert len(coords) == 65
        assert coords[0] == coords[-1]

    def test_vertices_lie_on_radius(self):
        center = (4.9, 52.37)
        circle = circle_polygon(center, 1000.0, steps=16)
        for vertex in list(circle.exterior.coords)[:-1]:
            assert geodesic_distance(center, vertex) == pytest.approx(1000.0, rel=1e-9)

    def test_first_vertex_due_north(self):
        circle = circle_polygon((0.0, 0.0), 1000.0, steps=8)
        lon, lat = circle.exterior.coords[0]
        assert lon == pytest.approx(0.0, abs=1e-12)
        assert lat > 0

    def test_counter_clockwise(self):
        assert circle_polygon((10.0, 45.0), 250.0).exterior.is_ccw

    def test_area_close_to_disc(self):
        radius = 2000.0
        circle = synthesize(CircleInput((-73.98, 40.75), radius))
        assert area(circle) == pytest.approx(math.pi * radius ** 2, rel=0.005)

    def test_steps_from_config(self):
        circle = synthesize(CircleInput((0.0, 0.0), 100.0), ResolutionConfig(circle_steps=12))
        assert len(circle.exterior.coords) == 13

    def test_explicit_steps_win(self):
        circle = synthesize(
            CircleInput((0.0, 0.0), 100.0, steps=6), ResolutionConfig(circle_steps=12)
        )
        assert len(circle.exterior.coords) == 7

    def test_from_edge_point(self):
        shape = CircleInput.from_edge_point((4.9, 52.37), (4.91, 52.37))
        assert shape.radius == pytest.approx(geodesic_distance((4.9, 52.37), (4.91, 52.37)))
        assert shape.category is ShapeCategory.CIRCLE

    @pytest.mark.parametrize("radius", [0.0, -5.0, float("nan"), float("inf")])
    def test_bad_radius(self, radius):
        with pytest.raises(InvalidShapeError):
            synthesize(CircleInput((0.0, 0.0), radius))


class TestPolygon:
    """Tests for free-drawn polygon synthesis."""

    def test_ring_is_closed(self):
        poly = synthesize(PolygonInput(((0, 0), (1, 0), (0, 1))))
        assert isinstance(poly, Polygon)
        coords = list(poly.exterior.coords)
        assert len(coords) == 4
        assert coords[0] == coords[-1]

    def test_closed_input_not_closed_twice(self):
        poly = synthesize(PolygonInput(((0, 0), (1, 0), (1, 1), (0, 0))))
        assert len(poly.exterior.coords) == 4

    def test_too_few_points(self):
        with pytest.raises(InsufficientPointsError, match="Polygon must have at least 3 points"):
            synthesize(PolygonInput(((0, 0), (1, 0))))

    def test_closing_point_does_not_count(self):
        with pytest.raises(InsufficientPointsError) as excinfo:
            synthesize(PolygonInput(((0, 0), (1, 0), (0, 0))))
        assert excinfo.value.required == 3
        assert excinfo.value.actual == 2


class TestLineString:
    """Tests for line synthesis."""

    def test_points_kept_in_order(self):
        line = synthesize(LineStringInput(((0, 0), (1, 1), (2, 0))))
        assert isinstance(line, LineString)
        assert list(line.coords) == [(0, 0), (1, 1), (2, 0)]

    def test_single_point(self):
        with pytest.raises(InsufficientPointsError, match="Line string must have at least 2 points"):
            synthesize(LineStringInput(((0, 0),)))


def test_unknown_input_type():
    with pytest.raises(TypeError):
        synthesize(object())
