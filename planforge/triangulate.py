"""Ear-clipping triangulation of simple polygons.

The input ring is expected in counter-clockwise order (positive signed area
with y pointing up). Use :func:`planforge.metrics.ensure_counter_clockwise`
on user-drawn rings before triangulating them.
"""

from __future__ import annotations

import warnings
from typing import List

from .core.errors import TriangulationError, TriangulationWarning
from .core.types import TriangulationFallback
from .core.values import Point, Shape, Triangle
from .intersection import cross_product


def _is_convex(a: Point, b: Point, c: Point) -> bool:
    return cross_product(a, b, c) > 0


def _find_ear(points: List[Point]) -> int:
    """Return the index of the first clippable ear, or -1 if there is none."""
    n = len(points)
    for i in range(n):
        prev_index = (i - 1) % n
        next_index = (i + 1) % n
        a, b, c = points[prev_index], points[i], points[next_index]

        if not _is_convex(a, b, c):
            continue

        ear = Triangle(a, b, c)
        if not any(
            ear.contains(p)
            for index, p in enumerate(points)
            if index not in (prev_index, i, next_index)
        ):
            return i

    return -1


def triangulate(
    shape: Shape,
    fallback: TriangulationFallback = TriangulationFallback.PARTIAL,
) -> List[Triangle]:
    """Split a simple polygon into triangles by ear clipping.

    Each pass scans the remaining vertices in order and clips the first ear:
    a strictly convex vertex whose triangle with its two neighbours contains
    no other remaining vertex (boundary included). The scan restarts after
    every clip until three vertices are left.

    Args:
        shape: Triangle or counter-clockwise simple Polygon
        fallback: What to do when a pass finds no ear (self-intersecting or
            clockwise input). PARTIAL warns and returns the triangles found
            so far; RAISE raises TriangulationError.

    Returns:
        ``n - 2`` triangles for a simple counter-clockwise polygon with ``n``
        vertices. A Triangle input is returned as a single-element list.

    Raises:
        TriangulationError: No ear found and ``fallback`` is RAISE

    Examples:
        >>> square = Polygon([Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)])
        >>> len(triangulate(square))
        2
    """
    if isinstance(shape, Triangle):
        return [shape]

    points = list(shape.points)
    if len(points) < 3:
        return []
    if len(points) == 3:
        return [Triangle(points[0], points[1], points[2])]

    triangles: List[Triangle] = []
    while len(points) > 3:
        ear_index = _find_ear(points)
        if ear_index < 0:
            break

        n = len(points)
        triangles.append(Triangle(points[(ear_index - 1) % n], points[ear_index], points[(ear_index + 1) % n]))
        del points[ear_index]

    if len(points) == 3:
        triangles.append(Triangle(points[0], points[1], points[2]))
        return triangles

    message = (
        f"No ear found with {len(points)} vertices left; "
        f"returning {len(triangles)} triangle(s). Is the polygon simple and counter-clockwise?"
    )
    if fallback == TriangulationFallback.RAISE:
        raise TriangulationError(message, triangles=triangles, remaining=len(points))

    warnings.warn(message, TriangulationWarning, stacklevel=2)
    return triangles


__all__ = ['triangulate']
