"""Immutable geometric values: points, edges and shapes.

``Shape`` is a closed union of :class:`Triangle` and :class:`Polygon`. Both
variants expose ``points`` as a tuple, so code that only needs the vertices
can treat them alike, and code that needs variant-specific behaviour matches
on the two classes explicitly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

import numpy as np

from ..intersection import cross_product, on_segment
from .errors import ValidationError
from .units import Centimeter


@dataclass(frozen=True)
class Point:
    """A position in whole centimetres.

    Plain integers are accepted and wrapped in :class:`Centimeter`.

    Examples:
        >>> Point(10, 20) == Point(Centimeter(10), Centimeter(20))
        True
    """
    x: Centimeter
    y: Centimeter

    def __post_init__(self):
        if not isinstance(self.x, Centimeter):
            object.__setattr__(self, 'x', Centimeter(self.x))
        if not isinstance(self.y, Centimeter):
            object.__setattr__(self, 'y', Centimeter(self.y))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x.value, self.y.value)

    def __str__(self):
        return f"({self.x}, {self.y})"


def _to_point(value) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


@dataclass(frozen=True)
class Edge:
    """Directed segment between two distinct points."""
    start: Point
    end: Point

    def __post_init__(self):
        if not self.length > 0:
            raise ValidationError(f"Edge length must be greater than 0: {self.start} -> {self.end}")

    @property
    def length(self) -> float:
        return math.hypot(self.end.x.value - self.start.x.value, self.end.y.value - self.start.y.value)

    def reversed(self) -> Edge:
        return Edge(self.end, self.start)


@dataclass(frozen=True)
class Triangle:
    """Three-point shape produced by triangulation."""
    p1: Point
    p2: Point
    p3: Point

    @property
    def points(self) -> Tuple[Point, Point, Point]:
        return (self.p1, self.p2, self.p3)

    def contains(self, point: Point) -> bool:
        """Check whether ``point`` is inside the triangle or on its boundary.

        The point is outside only when it sits strictly to the left of one
        edge and strictly to the right of another. Works for either winding.
        """
        sign1 = cross_product(point, self.p1, self.p2)
        sign2 = cross_product(point, self.p2, self.p3)
        sign3 = cross_product(point, self.p3, self.p1)

        has_neg = sign1 < 0 or sign2 < 0 or sign3 < 0
        has_pos = sign1 > 0 or sign2 > 0 or sign3 > 0

        return not (has_neg and has_pos)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class Polygon:
    """Ordered ring of at least three points.

    The ring is implicitly closed: the last point connects back to the first.
    Points are stored as a tuple, so a polygon never aliases the list it was
    built from.

    Examples:
        >>> square = Polygon([Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)])
        >>> square.contains(Point(50, 50))
        True
    """
    points: Tuple[Point, ...]

    def __post_init__(self):
        points = tuple(_to_point(p) for p in self.points)
        if len(points) < 3:
            raise ValidationError(f"Polygon must have at least 3 points, got {len(points)}")
        object.__setattr__(self, 'points', points)

    @classmethod
    def from_coords(cls, coords: Iterable[Tuple[int, int]]) -> Polygon:
        return cls(tuple(Point(int(x), int(y)) for x, y in coords))

    def __len__(self):
        return len(self.points)

    def edges(self) -> Iterator[Tuple[Point, Point]]:
        """Yield ``(start, end)`` for every edge, including last -> first."""
        n = len(self.points)
        for i in range(n):
            yield self.points[i], self.points[(i + 1) % n]

    def to_array(self) -> np.ndarray:
        """Return the vertices as an ``Nx2`` int64 array."""
        return np.array([p.as_tuple() for p in self.points], dtype=np.int64)

    def contains(self, point: Point) -> bool:
        """Check whether ``point`` is inside the polygon or on its boundary.

        Boundary points are reported up front. The bare ray cast would report
        some of them outside (vertices on the right or top of the ring, for
        instance), while every vertex and edge midpoint must be contained.
        Everything else goes through ray casting: a ray from ``point`` towards
        +x flips the ``inside`` flag at every edge it crosses. The crossing
        abscissa is computed with exact integers, truncated toward zero.
        """
        for start, end in self.edges():
            if on_segment(start, point, end):
                return True

        px, py = point.x.value, point.y.value
        inside = False
        j = len(self.points) - 1

        for i, pi in enumerate(self.points):
            pj = self.points[j]
            xi, yi = pi.x.value, pi.y.value
            xj, yj = pj.x.value, pj.y.value

            if (yi > py) != (yj > py):
                intersect_x = _trunc_div((xj - xi) * (py - yi), yj - yi) + xi
                if px < intersect_x:
                    inside = not inside
            j = i

        return inside

    def __str__(self):
        return f"Polygon(points=[{', '.join(str(p) for p in self.points)}])"


Shape = Union[Triangle, Polygon]


__all__ = [
    'Point',
    'Edge',
    'Triangle',
    'Polygon',
    'Shape',
]
