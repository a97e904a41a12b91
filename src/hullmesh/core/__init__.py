"""Core algorithms for hullmesh.

This module contains the computational-geometry core:

- Geometry primitives (orientation, areas, circumcircles, containment)
- Convex hull construction (monotone chain)
- Delaunay triangulation (incremental insertion with a super-triangle)
- Ear-clipping triangulation of simple polygons
- Batch triangulation across worker processes

The algorithms take flat coordinate buffers (``[x0, y0, x1, y1, ...]``) and
return fresh flat buffers of coordinates or indices. Each algorithm class keeps
private scratch buffers between calls, so an instance must not be shared
between threads; use one instance per thread or process.

Key classes:
- ConvexHull: Hull as coordinates or as indices into the input
- DelaunayTriangulator: Triangle indices for a point cloud
- EarClippingTriangulator: Triangle indices for a polygon outline
- PolygonBatchProcessor: Parallel ear clipping of many polygons
"""

from hullmesh.core.delaunay import DelaunayTriangulator, classify_circumcircle
from hullmesh.core.earclip import EarClippingTriangulator
from hullmesh.core.geometry import (
    cross,
    ensure_ccw,
    is_clockwise,
    is_collinear,
    orientation,
    point_in_polygon,
    point_in_triangle,
    polygon_area,
    polygon_centroid,
    spanned_area_sign,
    squared_distance,
    triangle_area,
    triangle_centroid,
    triangle_circumcenter,
    triangle_circumradius,
    triangle_signed_area,
    winding_direction,
)
from hullmesh.core.hull import ConvexHull
from hullmesh.core.processor import PolygonBatchProcessor, triangulate_polygon

__all__ = [
    # Algorithm classes
    "ConvexHull",
    "DelaunayTriangulator",
    "EarClippingTriangulator",
    # Batch processing
    "PolygonBatchProcessor",
    "triangulate_polygon",
    # Geometry functions
    "classify_circumcircle",
    "cross",
    "ensure_ccw",
    "is_clockwise",
    "is_collinear",
    "orientation",
    "point_in_polygon",
    "point_in_triangle",
    "polygon_area",
    "polygon_centroid",
    "spanned_area_sign",
    "squared_distance",
    "triangle_area",
    "triangle_centroid",
    "triangle_circumcenter",
    "triangle_circumradius",
    "triangle_signed_area",
    "winding_direction",
]
