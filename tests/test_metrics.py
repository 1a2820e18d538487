"""Tests for the metrics module."""

import pytest
from shapely.geometry import Polygon as ShapelyPolygon

from planforge.core.values import Point, Polygon, Triangle
from planforge.metrics import (
    ensure_counter_clockwise,
    is_counter_clockwise,
    is_simple,
    measure_polygon,
    perimeter,
    polygon_area,
    signed_area,
    to_shapely,
)


SQUARE = Polygon([(0, 0), (100, 0), (100, 100), (0, 100)])
CLOCKWISE_SQUARE = Polygon([(0, 0), (0, 100), (100, 100), (100, 0)])
L_SHAPE = Polygon([(0, 0), (100, 0), (100, 50), (50, 50), (50, 100), (0, 100)])
BOWTIE = Polygon([(0, 0), (100, 100), (0, 100), (100, 0)])


class TestArea:
    """Tests for signed_area and polygon_area."""

    def test_counter_clockwise_positive(self):
        """Test a counter-clockwise ring has positive area."""
        assert signed_area(SQUARE) == 10000.0

    def test_clockwise_negative(self):
        """Test a clockwise ring has negative area."""
        assert signed_area(CLOCKWISE_SQUARE) == -10000.0
        assert polygon_area(CLOCKWISE_SQUARE) == 10000.0

    def test_concave(self):
        """Test the L shape area."""
        assert polygon_area(L_SHAPE) == 7500.0

    def test_triangle(self):
        """Test triangles are measured too."""
        triangle = Triangle(Point(0, 0), Point(10, 0), Point(0, 10))
        assert polygon_area(triangle) == 50.0

    def test_matches_shapely(self):
        """Test the exact shoelace area agrees with Shapely."""
        assert polygon_area(L_SHAPE) == pytest.approx(to_shapely(L_SHAPE).area)

    def test_large_coordinates_exact(self):
        """Test no precision is lost near the coordinate limit."""
        big = 2_000_000_000
        polygon = Polygon([(-big, -big), (big, -big), (big, big), (-big, big)])
        assert signed_area(polygon) == float((2 * big) ** 2)


class TestPerimeter:
    """Tests for perimeter."""

    def test_square(self):
        """Test the closing edge is included."""
        assert perimeter(SQUARE) == pytest.approx(400.0)

    def test_l_shape(self):
        """Test the L shape perimeter equals its bounding square's."""
        assert perimeter(L_SHAPE) == pytest.approx(400.0)


class TestOrientation:
    """Tests for orientation helpers."""

    def test_is_counter_clockwise(self):
        """Test orientation detection."""
        assert is_counter_clockwise(SQUARE)
        assert not is_counter_clockwise(CLOCKWISE_SQUARE)

    def test_ensure_counter_clockwise_reverses(self):
        """Test a clockwise ring is reversed."""
        result = ensure_counter_clockwise(CLOCKWISE_SQUARE)
        assert is_counter_clockwise(result)
        assert set(result.points) == set(CLOCKWISE_SQUARE.points)

    def test_ensure_counter_clockwise_noop(self):
        """Test a counter-clockwise ring is returned unchanged."""
        assert ensure_counter_clockwise(SQUARE) is SQUARE


class TestShapelyBridge:
    """Tests for to_shapely and is_simple."""

    def test_to_shapely(self):
        """Test conversion keeps coordinates."""
        shape = to_shapely(SQUARE)
        assert isinstance(shape, ShapelyPolygon)
        assert list(shape.exterior.coords)[:4] == [(0, 0), (100, 0), (100, 100), (0, 100)]

    def test_simple_polygons(self):
        """Test valid outlines are simple."""
        assert is_simple(SQUARE)
        assert is_simple(L_SHAPE)

    def test_bowtie_not_simple(self):
        """Test a self-intersecting outline is detected."""
        assert not is_simple(BOWTIE)


class TestMeasurePolygon:
    """Tests for measure_polygon."""

    def test_square_metrics(self):
        """Test measuring a simple square."""
        metrics = measure_polygon(SQUARE)

        assert metrics["vertex_count"] == 4
        assert metrics["area"] == 10000.0
        assert metrics["perimeter"] == pytest.approx(400.0)
        assert metrics["is_simple"] is True
        assert metrics["is_counter_clockwise"] is True
        assert metrics["is_closed"] is False
        assert metrics["gap"] == 100.0

    def test_closed_ring(self):
        """Test a ring ending on its first point reports closed."""
        ring = Polygon([(0, 0), (100, 0), (100, 100), (0, 100), (1, 0)])
        metrics = measure_polygon(ring)

        assert metrics["is_closed"] is True
        assert metrics["gap"] == 1.0

    def test_close_tolerance(self):
        """Test the closing tolerance is honoured."""
        ring = Polygon([(0, 0), (100, 0), (100, 100), (0, 10)])
        assert measure_polygon(ring, close_tolerance=10.0)["is_closed"] is True
        assert measure_polygon(ring)["is_closed"] is False

    def test_bowtie_metrics(self):
        """Test an invalid outline is flagged."""
        metrics = measure_polygon(BOWTIE)
        assert metrics["is_simple"] is False
