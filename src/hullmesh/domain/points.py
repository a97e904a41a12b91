"""Core value types for flat coordinate buffers.

This module defines the fundamental types shared by the algorithms:
- PointSet: An immutable flat buffer of x/y pairs
- Triangle: An ordered triple of point indices
- WindingDirection: Enum for polygon winding direction
- VertexType: Enum for polygon vertex classification
- TriangleState: Enum for incremental triangulation bookkeeping
- CircleTest: Enum for circumcircle classification of a point
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from hullmesh.exceptions import InvalidInputSizeError


class WindingDirection(Enum):
    """Polygon winding direction.

    Directions follow the shoelace formula with the y-axis pointing up: a
    negative signed area is clockwise. On a y-down screen the same buffer
    appears mirrored.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()

    @classmethod
    def from_area(cls, signed_area: float) -> "WindingDirection":
        """Classify a signed area. Zero area counts as counter-clockwise."""
        return cls.CLOCKWISE if signed_area < 0 else cls.COUNTER_CLOCKWISE


class VertexType(Enum):
    """Classification of a vertex of a clockwise polygon.

    Values match the sign of the area spanned by (previous, vertex, next).
    """

    CONCAVE = -1
    TANGENTIAL = 0
    CONVEX = 1

    @classmethod
    def from_sign(cls, sign: int) -> "VertexType":
        """Return the vertex type for a spanned-area sign."""
        return cls(sign)


class TriangleState(Enum):
    """Whether a working triangle can still be affected by later insertions."""

    ACTIVE = auto()
    COMPLETE = auto()


class CircleTest(Enum):
    """Position of a point relative to a triangle's circumcircle.

    - INSIDE: on or within the circle, the triangle must be replaced
    - COMPLETE: entirely to the right of the circle, no later x-sorted
      point can reach it
    - INCOMPLETE: outside for now, or undecidable for collinear vertices
    """

    INSIDE = auto()
    COMPLETE = auto()
    INCOMPLETE = auto()


def point_count(
    points: Sequence[float],
    *,
    min_points: int = 0,
    max_points: int | None = None,
) -> int:
    """Validate a flat coordinate buffer and return its point count.

    Args:
        points: Flat buffer of x/y pairs
        min_points: Smallest acceptable number of points
        max_points: Largest acceptable number of points (None = unlimited)

    Returns:
        Number of points described by the buffer

    Raises:
        InvalidInputSizeError: If the buffer length is odd or the point count
            falls outside [min_points, max_points]
    """
    length = len(points)
    if length % 2 != 0:
        raise InvalidInputSizeError(length, "coordinate buffer length must be even")

    count = length // 2
    if count < min_points:
        raise InvalidInputSizeError(count, f"at least {min_points} points are required")
    if max_points is not None and count > max_points:
        raise InvalidInputSizeError(count, f"point count must be <= {max_points}")

    return count


@dataclass(frozen=True, slots=True)
class PointSet:
    """An ordered, immutable set of 2D points stored as a flat buffer.

    Index ``2i`` holds the x of point ``i`` and ``2i + 1`` its y.

    Attributes:
        coords: Flat tuple of coordinates
    """

    coords: tuple[float, ...]

    def __post_init__(self) -> None:
        point_count(self.coords)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> "PointSet":
        """Build a point set from (x, y) pairs."""
        coords: list[float] = []
        for x, y in pairs:
            coords.append(float(x))
            coords.append(float(y))
        return cls(tuple(coords))

    @classmethod
    def from_flat(cls, coords: Iterable[float]) -> "PointSet":
        """Build a point set from a flat iterable of coordinates."""
        return cls(tuple(float(v) for v in coords))

    def __len__(self) -> int:
        return len(self.coords) // 2

    def point(self, index: int) -> tuple[float, float]:
        """Return the (x, y) of the point at ``index``."""
        if not 0 <= index < len(self):
            raise IndexError(f"point index {index} out of range")
        return self.coords[2 * index], self.coords[2 * index + 1]

    def to_pairs(self) -> list[tuple[float, float]]:
        """Return the points as a list of (x, y) tuples."""
        return [(self.coords[i], self.coords[i + 1]) for i in range(0, len(self.coords), 2)]

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y), all zero for an empty set."""
        if not self.coords:
            return (0.0, 0.0, 0.0, 0.0)
        xs = self.coords[0::2]
        ys = self.coords[1::2]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"points": list(self.coords)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PointSet":
        """Deserialize from dictionary."""
        return cls.from_flat(data["points"])


@dataclass(frozen=True, slots=True)
class Triangle:
    """An ordered triple of point indices.

    Attributes:
        a: First vertex index
        b: Second vertex index
        c: Third vertex index
    """

    a: int
    b: int
    c: int

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to a plain (a, b, c) tuple."""
        return (self.a, self.b, self.c)

    def edges(self) -> tuple[tuple[int, int], tuple[int, int], tuple[int, int]]:
        """Return the three directed edges in winding order."""
        return ((self.a, self.b), (self.b, self.c), (self.c, self.a))


def triangles_from_indices(indices: Sequence[int]) -> list[Triangle]:
    """Group a flat index buffer with stride 3 into triangles.

    Raises:
        InvalidInputSizeError: If the buffer length is not a multiple of 3
    """
    if len(indices) % 3 != 0:
        raise InvalidInputSizeError(len(indices), "index buffer length must be a multiple of 3")
    return [
        Triangle(indices[i], indices[i + 1], indices[i + 2])
        for i in range(0, len(indices), 3)
    ]


def flatten_triangles(triangles: Iterable[Triangle]) -> list[int]:
    """Flatten triangles back into a stride-3 index buffer."""
    flat: list[int] = []
    for triangle in triangles:
        flat.extend(triangle.to_tuple())
    return flat
