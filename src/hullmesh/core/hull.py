"""Convex hull construction with the monotone chain algorithm.

Andrew's algorithm sorts the points lexicographically, then walks them once
left to right for the lower chain and once right to left for the upper chain,
popping every point that would make a non counter-clockwise turn.

Sorting is O(n log n) and chain construction O(n).
"""

from collections.abc import Sequence

from hullmesh.config import GeometryConfig
from hullmesh.core._sorting import gather, lexicographic_order
from hullmesh.core.geometry import cross
from hullmesh.domain import point_count


class ConvexHull:
    """Computes the convex hull of a set of points.

    Preconditions (not checked):
    - No duplicate points. Duplicates produce unspecified output.
    - Exactly collinear inputs yield the two extreme points only.

    The instance keeps scratch buffers between calls to avoid reallocating
    them. They are cleared at the start of every call, but an instance must
    not be shared between threads.

    Example:
        hull = ConvexHull()
        hull.compute_polygon([1, 1, 0, 0, 1, 0, 0, 1])
        # [0, 0, 1, 0, 1, 1, 0, 1]
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        """Initialize the hull builder.

        Args:
            config: Geometry settings (defaults used if None)
        """
        self.config = config or GeometryConfig()
        self._sorted_points: list[float] = []
        self._original_indices: list[int] = []
        self._chain: list[int] = []

    def compute_polygon(self, points: Sequence[float], is_sorted: bool = False) -> list[float]:
        """Return the convex hull polygon for the given point cloud.

        Args:
            points: Flat x/y buffer. Duplicate points result in undefined behavior.
            is_sorted: If False, the points are sorted by x then y first, which the
                algorithm requires. The input buffer is never modified.

        Returns:
            Flat x/y buffer of the hull in counter-clockwise order, without a
            repeated closing point. Fewer than three points are returned as is.

        Raises:
            InvalidInputSizeError: If the buffer length is odd
        """
        point_count(points)
        source = self._prepare(points, is_sorted)

        hull: list[float] = []
        for position in self._build_chain(source):
            hull.append(source[2 * position])
            hull.append(source[2 * position + 1])
        return hull

    def compute_indices(self, points: Sequence[float], is_sorted: bool = False) -> list[int]:
        """Compute the hull like ``compute_polygon`` but return point indices.

        Args:
            points: Flat x/y buffer. Duplicate points result in undefined behavior.
            is_sorted: Whether the points are already sorted by x then y

        Returns:
            Indices into ``points`` of the hull vertices in counter-clockwise order

        Raises:
            InvalidInputSizeError: If the buffer length is odd or the point count
                exceeds the index cap
        """
        point_count(points, max_points=self.config.max_points)
        source = self._prepare(points, is_sorted)

        chain = self._build_chain(source)
        if is_sorted:
            return list(chain)

        # Convert sorted to unsorted indices.
        return [self._original_indices[position] for position in chain]

    def _prepare(self, points: Sequence[float], is_sorted: bool) -> Sequence[float]:
        """Reset scratch state and return the buffer to walk."""
        self._chain.clear()
        self._original_indices.clear()
        self._sorted_points.clear()

        if is_sorted:
            return points

        self._original_indices.extend(lexicographic_order(points))
        return gather(points, self._original_indices, self._sorted_points)

    def _build_chain(self, points: Sequence[float]) -> list[int]:
        """Build lower and upper chains over sorted points.

        Returns:
            Sorted positions of the hull vertices, seam points dropped
        """
        chain = self._chain
        n = len(points) // 2

        # Lower hull.
        for i in range(n):
            while len(chain) >= 2 and self._turn(points, i) <= 0:
                chain.pop()
            chain.append(i)

        # Upper hull, never popping into the lower chain.
        floor = len(chain) + 1
        for i in range(n - 2, -1, -1):
            while len(chain) >= floor and self._turn(points, i) <= 0:
                chain.pop()
            chain.append(i)

        # The upper walk always ends on the first point again.
        if n >= 2:
            chain.pop()

        return chain

    def _turn(self, points: Sequence[float], candidate: int) -> float:
        """Cross product of the last two chain points and the candidate."""
        p1 = self._chain[-2]
        p2 = self._chain[-1]
        return cross(
            points[2 * p1],
            points[2 * p1 + 1],
            points[2 * p2],
            points[2 * p2 + 1],
            points[2 * candidate],
            points[2 * candidate + 1],
        )
