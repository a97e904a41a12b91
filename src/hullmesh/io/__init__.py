"""File I/O layer for hullmesh.

This module reads JSON point and polygon files into domain models and writes
algorithm results back out as JSON. The algorithms themselves never touch
files; this layer only serves the command-line interface.

Key classes:
- GeometryReader: Load point clouds and polygons
- ResultWriter: Save hulls and triangulations
"""

from hullmesh.io.reader import GeometryReader
from hullmesh.io.writer import ResultWriter

__all__ = [
    "GeometryReader",
    "ResultWriter",
]
