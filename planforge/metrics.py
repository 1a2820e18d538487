"""Shared measurement helpers for planforge shapes.

Areas are computed exactly from integer coordinates with the shoelace
formula. Simplicity checks are delegated to Shapely, which is also the
bridge for callers who want to run their own spatial queries.
"""

from __future__ import annotations

from typing import Dict, Union

import numpy as np
from shapely.geometry import Polygon as ShapelyPolygon

from .core.config import DEFAULT_CLOSE_TOLERANCE
from .core.values import Polygon, Shape
from .edit import calculate_gap_distance, is_polygon_closed


def signed_area(shape: Shape) -> float:
    """Shoelace area: positive for counter-clockwise rings, negative for clockwise."""
    points = shape.points
    n = len(points)
    twice_area = 0
    for i in range(n):
        a, b = points[i], points[(i + 1) % n]
        twice_area += a.x.value * b.y.value - b.x.value * a.y.value
    return twice_area / 2.0


def polygon_area(shape: Shape) -> float:
    """Unsigned area in square centimetres."""
    return abs(signed_area(shape))


def perimeter(shape: Shape) -> float:
    """Sum of all edge lengths, including the closing edge."""
    coords = np.array([p.as_tuple() for p in shape.points], dtype=float)
    deltas = np.roll(coords, -1, axis=0) - coords
    return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())


def is_counter_clockwise(shape: Shape) -> bool:
    return signed_area(shape) > 0


def ensure_counter_clockwise(polygon: Polygon) -> Polygon:
    """Return ``polygon`` in counter-clockwise order, reversing it if needed."""
    if signed_area(polygon) < 0:
        return Polygon(tuple(reversed(polygon.points)))
    return polygon


def to_shapely(shape: Shape) -> ShapelyPolygon:
    """Convert a planforge shape to a :class:`shapely.geometry.Polygon`."""
    return ShapelyPolygon([p.as_tuple() for p in shape.points])


def is_simple(polygon: Polygon) -> bool:
    """Check that the outline has no self-intersections and non-zero area."""
    return bool(to_shapely(polygon).is_valid)


def measure_polygon(
    polygon: Polygon,
    close_tolerance: float = DEFAULT_CLOSE_TOLERANCE,
) -> Dict[str, Union[float, int, bool]]:
    """Return core metrics for ``polygon``, e.g. for an editor status bar."""
    return {
        "vertex_count": len(polygon.points),
        "area": polygon_area(polygon),
        "perimeter": perimeter(polygon),
        "is_simple": is_simple(polygon),
        "is_counter_clockwise": is_counter_clockwise(polygon),
        "is_closed": is_polygon_closed(polygon, close_tolerance),
        "gap": calculate_gap_distance(polygon),
    }


__all__ = [
    'signed_area',
    'polygon_area',
    'perimeter',
    'is_counter_clockwise',
    'ensure_counter_clockwise',
    'to_shapely',
    'is_simple',
    'measure_polygon',
]
