"""Tolerances shared by the interactive editing operations."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError
from .types import TriangulationFallback

DEFAULT_VERTEX_THRESHOLD = 20.0
DEFAULT_EDGE_THRESHOLD = 20.0
DEFAULT_CLOSE_TOLERANCE = 1.0


@dataclass(frozen=True)
class EditConfig:
    """Hit-test radii and closing tolerance for one editing surface.

    Attributes:
        vertex_threshold: Maximum distance (cm) for a tap to pick a vertex
        edge_threshold: Maximum distance (cm) for a tap to pick an edge
        close_tolerance: Maximum first-to-last gap (cm) for a ring to count as closed
        triangulation_fallback: Behaviour when ear clipping gets stuck

    Examples:
        >>> touch = EditConfig(vertex_threshold=30.0, edge_threshold=25.0)
        >>> hit_test(tap, polygon, config=touch)
    """
    vertex_threshold: float = DEFAULT_VERTEX_THRESHOLD
    edge_threshold: float = DEFAULT_EDGE_THRESHOLD
    close_tolerance: float = DEFAULT_CLOSE_TOLERANCE
    triangulation_fallback: TriangulationFallback = TriangulationFallback.PARTIAL

    def __post_init__(self):
        if self.vertex_threshold < 0:
            raise ConfigurationError(f"vertex_threshold must be >= 0, got {self.vertex_threshold}")
        if self.edge_threshold < 0:
            raise ConfigurationError(f"edge_threshold must be >= 0, got {self.edge_threshold}")
        if self.close_tolerance < 0:
            raise ConfigurationError(f"close_tolerance must be >= 0, got {self.close_tolerance}")
        if not isinstance(self.triangulation_fallback, TriangulationFallback):
            raise ConfigurationError(
                f"triangulation_fallback must be a TriangulationFallback, got {self.triangulation_fallback!r}"
            )


__all__ = [
    'DEFAULT_VERTEX_THRESHOLD',
    'DEFAULT_EDGE_THRESHOLD',
    'DEFAULT_CLOSE_TOLERANCE',
    'EditConfig',
]
