"""Hullmesh - Convex hulls and triangle meshes from 2D point buffers.

Hullmesh turns flat coordinate buffers (``[x0, y0, x1, y1, ...]``) into either a
convex boundary or a set of triangles:

- ConvexHull: monotone chain (Andrew's algorithm)
- DelaunayTriangulator: incremental insertion with a bounding super-triangle
- EarClippingTriangulator: triangulation of simple, possibly concave polygons

Example:
    >>> from hullmesh.core import EarClippingTriangulator
    >>> EarClippingTriangulator().compute_triangles([0, 0, 1, 0, 1, 1, 0, 1])
    [0, 3, 2, 2, 1, 0]
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
