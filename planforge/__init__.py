"""Planforge - Polygon geometry for room and furniture layout editing.

This library provides the value types, exact intersection predicates,
triangulation and interactive editing operations behind a floor plan editor.
"""


# Units and shapes
from .core import (
    Centimeter,
    Length,
    Degree,
    cm,
    degree,
    Point,
    Edge,
    Triangle,
    Polygon,
    Shape,
)

# Intersection predicates
from .intersection import cross_product, edges_intersect, segments_overlap

# Triangulation
from .triangulate import triangulate

# Editing operations
from .edit import (
    calculate_distance,
    calculate_edge_lengths,
    calculate_interior_angle,
    calculate_all_interior_angles,
    is_polygon_closed,
    calculate_gap_distance,
    adjust_edge_length,
    move_vertex,
    adjust_angle_local,
    auto_close_polygon,
    apply_similarity_transformation,
    translate_polygon,
    rotate_polygon,
    find_nearest_vertex,
    find_nearest_edge,
    HitResult,
    hit_test,
)

# Construction
from .builder import PolygonBuilder, edit_polygon

# Measurements
from .metrics import polygon_area, perimeter, is_simple, measure_polygon, ensure_counter_clockwise

# Placement records
from .placement import PlacedShape, RoomShapeElement

# Core types (enums) and configuration
from .core import (
    TriangulationFallback,
    HitKind,
    RoomShapeType,
    EditConfig,
)

# Core exceptions
from .core import (
    PlanforgeError,
    ValidationError,
    VertexIndexError,
    TriangulationError,
    BuilderStateError,
    ConfigurationError,
    TriangulationWarning,
)

__all__ = [

    # Units and shapes
    'Centimeter',
    'Length',
    'Degree',
    'cm',
    'degree',
    'Point',
    'Edge',
    'Triangle',
    'Polygon',
    'Shape',

    # Intersection
    'cross_product',
    'edges_intersect',
    'segments_overlap',

    # Triangulation
    'triangulate',

    # Editing
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

    # Construction
    'PolygonBuilder',
    'edit_polygon',

    # Measurements
    'polygon_area',
    'perimeter',
    'is_simple',
    'measure_polygon',
    'ensure_counter_clockwise',

    # Placement
    'PlacedShape',
    'RoomShapeElement',

    # Core types (enums) and configuration
    'TriangulationFallback',
    'HitKind',
    'RoomShapeType',
    'EditConfig',

    # Core exceptions
    'PlanforgeError',
    'ValidationError',
    'VertexIndexError',
    'TriangulationError',
    'BuilderStateError',
    'ConfigurationError',
    'TriangulationWarning',
]
