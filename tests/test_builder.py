"""Tests for PolygonBuilder."""

import pytest

from planforge.builder import PolygonBuilder, edit_polygon
from planforge.core.errors import BuilderStateError, ValidationError
from planforge.core.values import Point, Polygon


def builder_from(*coords):
    return PolygonBuilder([Point(x, y) for x, y in coords])


class TestPolygonBuilderConstruction:
    """Tests for adding points and building."""

    def test_add_chains(self):
        """Test add returns the builder."""
        builder = PolygonBuilder()
        assert builder.add(Point(0, 0)) is builder
        assert len(builder) == 1

    def test_build_square(self):
        """Test building a four point polygon."""
        polygon = (
            PolygonBuilder()
            .add(Point(0, 0))
            .add(Point(100, 0))
            .add(Point(100, 100))
            .add(Point(0, 100))
            .build()
        )
        assert polygon == Polygon([(0, 0), (100, 0), (100, 100), (0, 100)])

    def test_insert(self):
        """Test inserting a point in the middle."""
        builder = builder_from((0, 0), (100, 100), (0, 100))
        builder.insert(1, Point(100, 0))
        assert builder.points[1] == Point(100, 0)
        assert len(builder) == 4

    def test_initial_points_copied(self):
        """Test the builder does not alias the caller's list."""
        source = [Point(0, 0), Point(10, 0)]
        builder = PolygonBuilder(source)
        builder.add(Point(10, 10))
        assert len(source) == 2

    def test_build_too_few_points(self):
        """Test building fewer than three points raises and keeps the builder usable."""
        builder = builder_from((0, 0), (10, 0))
        with pytest.raises(ValidationError):
            builder.build()

        assert not builder.is_built
        polygon = builder.add(Point(0, 10)).build()
        assert len(polygon.points) == 3

    def test_reuse_after_build(self):
        """Test a built builder rejects further use."""
        builder = builder_from((0, 0), (10, 0), (0, 10))
        builder.build()

        assert builder.is_built
        assert len(builder) == 0
        with pytest.raises(BuilderStateError):
            builder.add(Point(5, 5))
        with pytest.raises(BuilderStateError):
            builder.insert(0, Point(5, 5))
        with pytest.raises(BuilderStateError):
            builder.build()

    def test_edit_polygon(self):
        """Test seeding a builder from an existing polygon."""
        polygon = Polygon([(0, 0), (100, 0), (100, 100)])
        builder = edit_polygon(polygon)
        builder.add(Point(0, 100))

        assert builder.points[:3] == polygon.points
        assert len(polygon.points) == 3


class TestPolygonBuilderIntersects:
    """Tests for the self-intersection pre-check.

    ``intersects`` answers whether a point can be appended safely: True means
    the new edge is clear.
    """

    def test_fewer_than_two_points(self):
        """Test any point is accepted while the ring has no edges."""
        assert PolygonBuilder().intersects(Point(5, 5))
        assert builder_from((0, 0)).intersects(Point(5, 5))

    def test_collinear_continuation(self):
        """Test extending along the previous edge is allowed."""
        assert builder_from((0, 0), (50, 50)).intersects(Point(100, 100))

    def test_clear_point(self):
        """Test a point that keeps the outline simple."""
        assert builder_from((0, 0), (100, 0), (100, 100)).intersects(Point(50, 150))

    def test_crossing_point(self):
        """Test a new edge crossing an earlier edge is rejected."""
        builder = builder_from((0, 0), (100, 0), (100, 100), (0, 100))
        assert not builder.intersects(Point(50, -50))

    def test_touching_point(self):
        """Test a new edge ending on an earlier edge is rejected."""
        builder = builder_from((0, 0), (100, 0), (100, 100), (50, 100))
        assert not builder.intersects(Point(50, 0))

    def test_duplicate_of_last_point(self):
        """Test a zero-length edge is rejected."""
        builder = builder_from((0, 0), (100, 0), (100, 100))
        assert not builder.intersects(Point(100, 100))

    def test_closing_on_first_point(self):
        """Test returning to the first point is allowed."""
        builder = builder_from((0, 0), (100, 0), (100, 100), (0, 100))
        assert builder.intersects(Point(0, 0))

    def test_does_not_modify_builder(self):
        """Test the check never commits the point."""
        builder = builder_from((0, 0), (100, 0))
        builder.intersects(Point(100, 100))
        assert len(builder) == 2

    def test_draw_session(self):
        """Test drawing a room tap by tap, skipping an invalid tap."""
        builder = PolygonBuilder()
        taps = [(0, 0), (300, 0), (300, 200), (150, -50), (0, 200)]
        for x, y in taps:
            point = Point(x, y)
            if builder.intersects(point):
                builder.add(point)

        polygon = builder.build()
        assert polygon.points == (Point(0, 0), Point(300, 0), Point(300, 200), Point(0, 200))
