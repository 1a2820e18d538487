"""Interactive polygon editing operations.

Every function here is pure: polygons are never modified, edits return a new
:class:`~planforge.core.values.Polygon`. Coordinates produced by an edit are
rounded half-up to whole centimetres.

Some edits deliberately touch a single vertex (:func:`adjust_edge_length`,
:func:`adjust_angle_local`, :func:`move_vertex`). They can leave the ring
visibly open; check with :func:`is_polygon_closed` and repair with
:func:`auto_close_polygon` when the caller wants a closed outline.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import List, Optional, Union

import numpy as np

from .core.config import (
    DEFAULT_CLOSE_TOLERANCE,
    DEFAULT_EDGE_THRESHOLD,
    DEFAULT_VERTEX_THRESHOLD,
    EditConfig,
)
from .core.errors import ValidationError, VertexIndexError
from .core.types import HitKind
from .core.units import Centimeter, Degree, Length
from .core.values import Point, Polygon

LengthLike = Union[Centimeter, Length, int, float]
AngleLike = Union[Degree, float]


# ============================================================================
# Private helpers
# ============================================================================

def _check_index(polygon: Polygon, index: int, what: str = "Vertex") -> int:
    size = len(polygon.points)
    if isinstance(index, bool) or not isinstance(index, Integral) or not 0 <= index < size:
        raise VertexIndexError(index, size, what)
    return int(index)


def _positive_length(value: LengthLike) -> float:
    if isinstance(value, (Centimeter, Length)):
        value = value.value
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"Edge length must be a number, got {value!r}")
    if not value > 0:
        raise ValidationError(f"Edge length must be positive, got {value}")
    return float(value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _round_array(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5).astype(np.int64)


def _point_to_segment_distance(
    point: np.ndarray,
    segment_start: np.ndarray,
    segment_end: np.ndarray
) -> float:
    """Calculate distance from point to line segment.

    Args:
        point: Point coordinates (2D)
        segment_start: Segment start point (2D)
        segment_end: Segment end point (2D)

    Returns:
        Distance from point to closest point on segment
    """
    line_vec = segment_end - segment_start
    line_len_sq = np.dot(line_vec, line_vec)

    if line_len_sq == 0:
        # Degenerate segment (start == end)
        return float(np.hypot(*(point - segment_start)))

    # Project point onto line (clamped to segment)
    t = max(0.0, min(1.0, np.dot(point - segment_start, line_vec) / line_len_sq))

    projection = segment_start + t * line_vec

    return float(np.hypot(*(point - projection)))


def _nearest_within(distances: np.ndarray, threshold: float) -> Optional[int]:
    """Index of the first strictly-closest distance below ``threshold``."""
    if len(distances) == 0:
        return None
    index = int(np.argmin(distances))
    return index if distances[index] < threshold else None


def _replace_point(polygon: Polygon, index: int, point: Point) -> Polygon:
    points = list(polygon.points)
    points[index] = point
    return Polygon(points)


# ============================================================================
# Measurements
# ============================================================================

def calculate_distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points, in centimetres."""
    return math.hypot(p2.x.value - p1.x.value, p2.y.value - p1.y.value)


def calculate_edge_lengths(polygon: Polygon) -> List[int]:
    """Length of every edge, rounded to the nearest centimetre.

    Edge ``i`` runs from vertex ``i`` to vertex ``i + 1``; the last edge wraps
    back to vertex 0.

    Examples:
        >>> square = Polygon([Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)])
        >>> calculate_edge_lengths(square)
        [100, 100, 100, 100]
    """
    coords = polygon.to_array().astype(float)
    deltas = np.roll(coords, -1, axis=0) - coords
    lengths = np.hypot(deltas[:, 0], deltas[:, 1])
    return [int(v) for v in _round_array(lengths)]


def calculate_interior_angle(polygon: Polygon, vertex_index: int) -> float:
    """Interior angle at a vertex, in degrees within ``[0, 360)``.

    The angle is swept counter-clockwise from the direction of the next
    vertex to the direction of the previous one, which is the interior angle
    of a counter-clockwise ring. Reflex corners report values above 180.

    Raises:
        VertexIndexError: ``vertex_index`` is out of range
    """
    vertex_index = _check_index(polygon, vertex_index)
    n = len(polygon.points)
    prev = polygon.points[(vertex_index - 1) % n]
    current = polygon.points[vertex_index]
    nxt = polygon.points[(vertex_index + 1) % n]

    angle_prev = math.atan2(prev.y.value - current.y.value, prev.x.value - current.x.value)
    angle_next = math.atan2(nxt.y.value - current.y.value, nxt.x.value - current.x.value)

    angle = math.degrees(angle_prev - angle_next) % 360.0
    return 0.0 if angle >= 360.0 else angle


def calculate_all_interior_angles(polygon: Polygon) -> List[float]:
    """Interior angle of every vertex, in order."""
    return [calculate_interior_angle(polygon, i) for i in range(len(polygon.points))]


def is_polygon_closed(polygon: Polygon, tolerance: float = DEFAULT_CLOSE_TOLERANCE) -> bool:
    """Check whether the first and last points are within ``tolerance``.

    While drawing, the user finishes a room by placing the last point on top
    of the first one; this test tells whether that has happened.
    """
    if len(polygon.points) < 3:
        return False
    return calculate_distance(polygon.points[0], polygon.points[-1]) <= tolerance


def calculate_gap_distance(polygon: Polygon) -> float:
    """Distance between the first and last point (how far the ring is open)."""
    return calculate_distance(polygon.points[0], polygon.points[-1])


# ============================================================================
# Edits
# ============================================================================

def adjust_edge_length(polygon: Polygon, edge_index: int, new_length: LengthLike) -> Polygon:
    """Change one edge's length by moving its second endpoint.

    The edge keeps its direction and its first endpoint. No other vertex
    moves, so the edge after this one changes length as a side effect.

    Args:
        polygon: Polygon to edit
        edge_index: Edge to resize (from vertex ``edge_index`` to the next)
        new_length: Target length in centimetres

    Returns:
        New polygon, or ``polygon`` itself when the edge has zero length

    Raises:
        VertexIndexError: ``edge_index`` is out of range
        ValidationError: ``new_length`` is not positive
    """
    edge_index = _check_index(polygon, edge_index, "Edge")
    target = _positive_length(new_length)

    n = len(polygon.points)
    end_index = (edge_index + 1) % n
    p1 = polygon.points[edge_index]
    p2 = polygon.points[end_index]

    dx = p2.x.value - p1.x.value
    dy = p2.y.value - p1.y.value
    current_length = math.hypot(dx, dy)

    if current_length == 0.0:
        return polygon

    new_p2 = Point(
        _round_half_up(p1.x.value + target * dx / current_length),
        _round_half_up(p1.y.value + target * dy / current_length),
    )
    return _replace_point(polygon, end_index, new_p2)


def move_vertex(polygon: Polygon, vertex_index: int, new_position: Point) -> Polygon:
    """Replace one vertex. Simplicity of the result is not re-checked.

    Raises:
        VertexIndexError: ``vertex_index`` is out of range
    """
    vertex_index = _check_index(polygon, vertex_index)
    return _replace_point(polygon, vertex_index, new_position)


def adjust_angle_local(polygon: Polygon, vertex_index: int, new_angle_degrees: AngleLike) -> Polygon:
    """Set the interior angle at a vertex by rotating the following edge.

    The previous edge is the reference and stays put. The next vertex is
    moved so that the angle (as measured by :func:`calculate_interior_angle`)
    equals ``new_angle_degrees`` while both adjacent edges keep their
    lengths. Vertices after the next one are not realigned, so the ring can
    open up.

    Raises:
        VertexIndexError: ``vertex_index`` is out of range
        ValidationError: angle is not strictly between 0 and 360
    """
    vertex_index = _check_index(polygon, vertex_index)
    angle = float(new_angle_degrees)
    if not 0.0 < angle < 360.0:
        raise ValidationError(f"Angle must be between 0 and 360 degrees, got {angle}")

    n = len(polygon.points)
    next_index = (vertex_index + 1) % n
    prev = polygon.points[(vertex_index - 1) % n]
    current = polygon.points[vertex_index]
    nxt = polygon.points[next_index]

    prev_direction = math.atan2(current.y.value - prev.y.value, current.x.value - prev.x.value)
    next_direction = prev_direction + math.pi - math.radians(angle)
    next_length = calculate_distance(current, nxt)

    new_next = Point(
        current.x.value + _round_half_up(next_length * math.cos(next_direction)),
        current.y.value + _round_half_up(next_length * math.sin(next_direction)),
    )
    return _replace_point(polygon, next_index, new_next)


def auto_close_polygon(polygon: Polygon, tolerance: float = DEFAULT_CLOSE_TOLERANCE) -> Polygon:
    """Close an open ring by dropping its last point.

    A ring drawn by hand ends with a point placed roughly on top of the
    first one. Dropping it lets the implicit last -> first edge close the
    shape. Nothing is interpolated or redistributed.

    Raises:
        ValidationError: the ring is open and has only three points
    """
    if is_polygon_closed(polygon, tolerance):
        return polygon
    return Polygon(polygon.points[:-1])


def apply_similarity_transformation(
    polygon: Polygon,
    reference_edge_index: int,
    new_length: LengthLike,
) -> Polygon:
    """Scale the whole polygon so one edge gets a given length.

    Every vertex is scaled about the first vertex by
    ``new_length / current_length``, so angles and length ratios are kept.
    Used when the user enters the first real-world dimension of a sketch.

    Raises:
        VertexIndexError: ``reference_edge_index`` is out of range
        ValidationError: ``new_length`` is not positive

    Examples:
        >>> square = Polygon([Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)])
        >>> calculate_edge_lengths(apply_similarity_transformation(square, 0, 200))
        [200, 200, 200, 200]
    """
    reference_edge_index = _check_index(polygon, reference_edge_index, "Reference edge")
    target = _positive_length(new_length)

    p1 = polygon.points[reference_edge_index]
    p2 = polygon.points[(reference_edge_index + 1) % len(polygon.points)]
    current_length = calculate_distance(p1, p2)

    if current_length == 0.0:
        return polygon

    scale = target / current_length
    coords = polygon.to_array().astype(float)
    origin = coords[0]
    scaled = origin + (coords - origin) * scale

    return Polygon.from_coords(_round_array(scaled))


def translate_polygon(polygon: Polygon, dx: int, dy: int) -> Polygon:
    """Shift every vertex by ``(dx, dy)`` centimetres."""
    return Polygon.from_coords(polygon.to_array() + np.array([int(dx), int(dy)], dtype=np.int64))


def rotate_polygon(polygon: Polygon, angle: AngleLike, origin: Optional[Point] = None) -> Polygon:
    """Rotate counter-clockwise by ``angle`` degrees about ``origin``.

    ``origin`` defaults to the first vertex.
    """
    if origin is None:
        origin = polygon.points[0]
    radians = math.radians(float(angle))
    cos_a, sin_a = math.cos(radians), math.sin(radians)
    rotation = np.array([[cos_a, -sin_a], [sin_a, cos_a]])

    center = np.array(origin.as_tuple(), dtype=float)
    offsets = polygon.to_array().astype(float) - center
    rotated = center + offsets @ rotation.T

    return Polygon.from_coords(_round_array(rotated))


# ============================================================================
# Hit testing
# ============================================================================

def find_nearest_vertex(
    point: Point,
    polygon: Polygon,
    threshold: float = DEFAULT_VERTEX_THRESHOLD,
) -> Optional[int]:
    """Index of the vertex closest to ``point``, if closer than ``threshold``.

    Ties go to the lowest index.
    """
    coords = polygon.to_array().astype(float)
    distances = np.hypot(coords[:, 0] - point.x.value, coords[:, 1] - point.y.value)
    return _nearest_within(distances, threshold)


def find_nearest_edge(
    point: Point,
    polygon: Polygon,
    threshold: float = DEFAULT_EDGE_THRESHOLD,
) -> Optional[int]:
    """Index of the edge closest to ``point``, if closer than ``threshold``.

    Distance is measured to the segment, not the infinite line. Ties go to
    the lowest index.
    """
    coords = polygon.to_array().astype(float)
    target = np.array(point.as_tuple(), dtype=float)
    n = len(coords)
    distances = np.array([
        _point_to_segment_distance(target, coords[i], coords[(i + 1) % n])
        for i in range(n)
    ])
    return _nearest_within(distances, threshold)


@dataclass(frozen=True)
class HitResult:
    kind: HitKind
    index: int


def hit_test(point: Point, polygon: Polygon, config: Optional[EditConfig] = None) -> Optional[HitResult]:
    """Resolve a tap to a vertex or, failing that, an edge.

    Thresholds come from ``config`` (defaults to ``EditConfig()``).
    """
    config = config or EditConfig()

    vertex = find_nearest_vertex(point, polygon, config.vertex_threshold)
    if vertex is not None:
        return HitResult(HitKind.VERTEX, vertex)

    edge = find_nearest_edge(point, polygon, config.edge_threshold)
    if edge is not None:
        return HitResult(HitKind.EDGE, edge)

    return None


__all__ = [
    'calculate_distance',
    'calculate_edge_lengths',
    'calculate_interior_angle',
    'calculate_all_interior_angles',
    'is_polygon_closed',
    'calculate_gap_distance',
    'adjust_edge_length',
    'move_vertex',
    'adjust_angle_local',
    'auto_close_polygon',
    'apply_similarity_transformation',
    'translate_polygon',
    'rotate_polygon',
    'find_nearest_vertex',
    'find_nearest_edge',
    'HitResult',
    'hit_test',
]
