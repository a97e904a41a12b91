"""Domain models for hullmesh.

This module contains the value types passed into and out of the algorithms.
All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Thin wrappers around flat coordinate and index buffers

Key classes:
- PointSet: A flat buffer of 2D points
- Triangle: An ordered triple of point indices
- Polygon: A named polygon outline for batch processing
- PolygonTriangulation: Ear-clipping result for one polygon
"""

from hullmesh.domain.points import (
    CircleTest,
    PointSet,
    Triangle,
    TriangleState,
    VertexType,
    WindingDirection,
    flatten_triangles,
    point_count,
    triangles_from_indices,
)
from hullmesh.domain.polygon import Polygon, PolygonTriangulation

__all__: list[str] = [
    # Enums
    "CircleTest",
    "TriangleState",
    "VertexType",
    "WindingDirection",
    # Core types
    "PointSet",
    "Triangle",
    "Polygon",
    "PolygonTriangulation",
    # Buffer helpers
    "flatten_triangles",
    "point_count",
    "triangles_from_indices",
]
