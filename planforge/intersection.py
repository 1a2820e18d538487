"""Exact segment intersection predicates.

Coordinates are integer centimetres, so every orientation test is computed
exactly with Python integers; no epsilon is involved anywhere in this module.

Endpoint-only contact never counts as an intersection. Two consecutive edges
of a polygon always share an endpoint, and treating that contact as a
crossing would flag every chain of edges as self-intersecting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core.values import Edge, Point


def cross_product(o: Point, a: Point, b: Point) -> int:
    """Z component of ``(a - o) x (b - o)``.

    Returns:
        Positive for a counter-clockwise turn ``o -> a -> b``, negative for a
        clockwise turn and zero when the three points are collinear.

    Examples:
        >>> cross_product(Point(0, 0), Point(10, 0), Point(10, 10))
        100
    """
    ox, oy = o.x.value, o.y.value
    return (a.x.value - ox) * (b.y.value - oy) - (a.y.value - oy) * (b.x.value - ox)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def on_segment_interior(p: Point, q: Point, r: Point) -> bool:
    """Check whether ``q`` lies on segment ``p-r`` without being an endpoint.

    Assumes ``q`` is already known to be collinear with ``p`` and ``r``; only
    the bounding box is tested here.
    """
    if q == p or q == r:
        return False

    return (
        min(p.x.value, r.x.value) <= q.x.value <= max(p.x.value, r.x.value)
        and min(p.y.value, r.y.value) <= q.y.value <= max(p.y.value, r.y.value)
    )


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Check whether ``q`` lies anywhere on the closed segment ``p-r``."""
    if cross_product(p, r, q) != 0:
        return False
    return (
        min(p.x.value, r.x.value) <= q.x.value <= max(p.x.value, r.x.value)
        and min(p.y.value, r.y.value) <= q.y.value <= max(p.y.value, r.y.value)
    )


def segments_overlap(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    """Check whether two collinear segments share more than a single point.

    The segments' bounding boxes are intersected. An empty intersection means
    the segments are apart; an intersection collapsed to one point means they
    only touch end to end. Anything larger is a real overlap.
    """
    low_x = max(min(p1.x.value, p2.x.value), min(q1.x.value, q2.x.value))
    high_x = min(max(p1.x.value, p2.x.value), max(q1.x.value, q2.x.value))
    low_y = max(min(p1.y.value, p2.y.value), min(q1.y.value, q2.y.value))
    high_y = min(max(p1.y.value, p2.y.value), max(q1.y.value, q2.y.value))

    if low_x > high_x or low_y > high_y:
        return False

    return (low_x, low_y) != (high_x, high_y)


def edges_intersect(e1: Edge, e2: Edge) -> bool:
    """Check whether two edges cross, overlap or form a T-junction.

    Args:
        e1: First edge
        e2: Second edge

    Returns:
        True when the edges cross properly, overlap along a common line, or
        when an endpoint of one lies strictly inside the other. False when
        they are disjoint or only touch at a shared endpoint.

    Examples:
        >>> diagonal = Edge(Point(0, 0), Point(100, 100))
        >>> anti_diagonal = Edge(Point(0, 100), Point(100, 0))
        >>> edges_intersect(diagonal, anti_diagonal)
        True
        >>> edges_intersect(Edge(Point(0, 0), Point(10, 0)), Edge(Point(10, 0), Point(10, 10)))
        False
    """
    o1, a1 = e1.start, e1.end
    o2, a2 = e2.start, e2.end

    d1 = cross_product(o1, a1, o2)
    d2 = cross_product(o1, a1, a2)
    d3 = cross_product(o2, a2, o1)
    d4 = cross_product(o2, a2, a1)

    if _sign(d1) * _sign(d2) < 0 and _sign(d3) * _sign(d4) < 0:
        return True

    # Collinear: both endpoints of one edge sit on the other's line
    if d1 == 0 and d2 == 0:
        return segments_overlap(o1, a1, o2, a2)
    if d3 == 0 and d4 == 0:
        return segments_overlap(o2, a2, o1, a1)

    # T-junction
    if d1 == 0 and on_segment_interior(o1, o2, a1):
        return True
    if d2 == 0 and on_segment_interior(o1, a2, a1):
        return True
    if d3 == 0 and on_segment_interior(o2, o1, a2):
        return True
    if d4 == 0 and on_segment_interior(o2, a1, a2):
        return True

    return False


__all__ = [
    'cross_product',
    'on_segment',
    'on_segment_interior',
    'segments_overlap',
    'edges_intersect',
]
