"""Incremental polygon construction for free-hand drawing.

A :class:`PolygonBuilder` collects points one tap at a time. Before each
point is committed the caller can ask :meth:`PolygonBuilder.intersects`
whether the new edge would cross the outline drawn so far.

A builder belongs to one drawing session. It is not safe to share between
threads, and it is consumed by :meth:`PolygonBuilder.build`.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .core.errors import BuilderStateError
from .core.values import Edge, Point, Polygon
from .intersection import edges_intersect


class PolygonBuilder:
    """Mutable point list that yields an immutable :class:`Polygon`.

    Examples:
        >>> builder = PolygonBuilder()
        >>> builder.add(Point(0, 0)).add(Point(100, 0))
        >>> builder.intersects(Point(100, 100))
        True
        >>> polygon = builder.add(Point(100, 100)).build()
    """

    def __init__(self, points: Optional[Iterable[Point]] = None):
        self._points: List[Point] = list(points) if points is not None else []
        self._built = False

    @property
    def points(self) -> Tuple[Point, ...]:
        """Snapshot of the points added so far."""
        return tuple(self._points)

    @property
    def is_built(self) -> bool:
        return self._built

    def __len__(self):
        return len(self._points)

    def _ensure_open(self) -> None:
        if self._built:
            raise BuilderStateError("PolygonBuilder has already been built; start a new builder")

    def add(self, point: Point) -> PolygonBuilder:
        """Append a point without validation."""
        self._ensure_open()
        self._points.append(point)
        return self

    def insert(self, index: int, point: Point) -> PolygonBuilder:
        """Insert a point before ``index`` without validation."""
        self._ensure_open()
        self._points.insert(index, point)
        return self

    def intersects(self, point: Point) -> bool:
        """Check whether ``point`` can be appended without self-intersection.

        The tentative edge runs from the last committed point to ``point``
        and is tested against every edge of the partial ring, including the
        closing edge back to the first point. Edges sharing an endpoint with
        the tentative edge are skipped.

        Returns:
            True if the new edge is clear (safe to add), False if it crosses
            the outline or would have zero length. Always True while fewer
            than two points exist.
        """
        if len(self._points) < 2:
            return True

        new_start = self._points[-1]
        new_end = point
        if new_start == new_end:
            return False
        new_edge = Edge(new_start, new_end)

        n = len(self._points)
        for i in range(n):
            edge_start = self._points[i]
            edge_end = self._points[(i + 1) % n]

            if edge_start == edge_end:
                continue
            if edge_start in (new_start, new_end) or edge_end in (new_start, new_end):
                continue

            if edges_intersect(new_edge, Edge(edge_start, edge_end)):
                return False

        return True

    def build(self) -> Polygon:
        """Validate and return the polygon. The builder cannot be reused.

        Raises:
            ValidationError: fewer than three points were added
            BuilderStateError: ``build()`` was already called
        """
        self._ensure_open()
        polygon = Polygon(self._points)
        self._built = True
        self._points = []
        return polygon


def edit_polygon(polygon: Polygon) -> PolygonBuilder:
    """Start a builder seeded with an existing polygon's points."""
    return PolygonBuilder(polygon.points)


__all__ = [
    'PolygonBuilder',
    'edit_polygon',
]
