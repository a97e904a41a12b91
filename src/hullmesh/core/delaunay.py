"""Delaunay triangulation by incremental insertion.

Points are inserted in x order into a mesh seeded with a super-triangle that
encloses them all. Each insertion removes the triangles whose circumcircle
contains the new point, then fans the hole boundary to the point. Triangles
touching the super-triangle are discarded at the end.

Every insertion rescans all triangles still marked active. Triangles whose
circumcircle lies entirely left of the current point are marked complete and
skipped from then on, which prunes most of the work for spread-out inputs, but
the worst case remains superlinear in the triangle count per insertion. This
suits moderate point counts, not huge clouds.
"""

from collections.abc import Sequence

from hullmesh.config import GeometryConfig
from hullmesh.core._sorting import gather, x_order
from hullmesh.core.geometry import point_in_polygon, triangle_centroid
from hullmesh.domain import CircleTest, TriangleState, point_count

Edge = tuple[int, int]


def classify_circumcircle(
    xp: float,
    yp: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
    epsilon: float = 1e-6,
) -> CircleTest:
    """Classify a point against the circumcircle of a triangle.

    The circumcenter is found by intersecting perpendicular bisectors. Edges
    with (nearly) equal y are handled separately; when two consecutive edges are
    both horizontal the triangle is degenerate and the test is inconclusive.
    Points on the circle, within ``epsilon``, count as inside.

    Args:
        xp: X of the point being inserted
        yp: Y of the point being inserted
        x1, y1, x2, y2, x3, y3: Triangle vertices
        epsilon: Tolerance for horizontal edges and on-circle points

    Returns:
        INSIDE, COMPLETE (circle entirely left of the point) or INCOMPLETE
    """
    y1y2 = abs(y1 - y2)
    y2y3 = abs(y2 - y3)

    if y1y2 < epsilon:
        if y2y3 < epsilon:
            return CircleTest.INCOMPLETE

        m2 = -(x3 - x2) / (y3 - y2)
        mx2 = (x2 + x3) / 2
        my2 = (y2 + y3) / 2
        xc = (x2 + x1) / 2
        yc = m2 * (xc - mx2) + my2
    else:
        m1 = -(x2 - x1) / (y2 - y1)
        mx1 = (x1 + x2) / 2
        my1 = (y1 + y2) / 2

        if y2y3 < epsilon:
            xc = (x3 + x2) / 2
        else:
            m2 = -(x3 - x2) / (y3 - y2)
            mx2 = (x2 + x3) / 2
            my2 = (y2 + y3) / 2
            if m1 == m2:
                # Collinear vertices, the bisectors never meet.
                return CircleTest.INCOMPLETE
            xc = (m1 * mx1 - m2 * mx2 + my2 - my1) / (m1 - m2)

        yc = m1 * (xc - mx1) + my1

    dx = x2 - xc
    dy = y2 - yc
    rsqr = dx * dx + dy * dy

    dx = xp - xc
    dx *= dx
    dy = yp - yc

    if dx + dy * dy - rsqr <= epsilon:
        return CircleTest.INSIDE

    if xp > xc and dx > rsqr:
        return CircleTest.COMPLETE
    return CircleTest.INCOMPLETE


class DelaunayTriangulator:
    """Computes a Delaunay triangulation of a point set.

    Each emitted triangle has no other input point strictly inside its
    circumcircle. All triangles share one winding: negative signed area in a
    y-up frame, which reads clockwise on a y-down screen.

    Degenerate inputs (exactly collinear or cocircular points) are handled on
    a best-effort basis and never raise.

    The instance keeps scratch buffers between calls; they are cleared on every
    call, but an instance must not be shared between threads.

    Example:
        triangulator = DelaunayTriangulator()
        indices = triangulator.compute_triangles([0, 0, 1, 0, 1, 1, 0, 1, 0.5, 0.5])
        # 12 indices, every triangle uses point 4
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        """Initialize the triangulator.

        Args:
            config: Geometry settings (defaults used if None)
        """
        self.config = config or GeometryConfig()
        self._sorted_points: list[float] = []
        self._original_indices: list[int] = []
        self._triangles: list[tuple[int, int, int]] = []
        self._states: list[TriangleState] = []
        self._edges: dict[Edge, Edge] = {}

    def compute_triangles(self, points: Sequence[float], is_sorted: bool = False) -> list[int]:
        """Triangulate a point cloud.

        Args:
            points: Flat x/y buffer. Duplicate points result in undefined behavior.
            is_sorted: If False, the points are sorted by x first, which the
                algorithm requires. The input buffer is never modified.

        Returns:
            Flat triangle index buffer, stride 3, indexing ``points``. Empty for
            fewer than three points.

        Raises:
            InvalidInputSizeError: If the buffer length is odd or the point count
                exceeds the index cap
        """
        n = point_count(points, max_points=self.config.max_points)
        self._reset()

        if n < 3:
            return []

        if is_sorted:
            coords = list(points)
        else:
            self._original_indices.extend(x_order(points))
            coords = gather(points, self._original_indices, self._sorted_points)

        # Super-triangle vertices are appended after the real points.
        coords = coords + self._super_triangle(coords)

        self._triangles.append((n, n + 1, n + 2))
        self._states.append(TriangleState.ACTIVE)

        for position in range(n):
            self._insert(coords, position)

        triangles: list[int] = []
        for a, b, c in self._triangles:
            if a >= n or b >= n or c >= n:
                continue
            if is_sorted:
                triangles.extend((a, b, c))
            else:
                triangles.extend(
                    (
                        self._original_indices[a],
                        self._original_indices[b],
                        self._original_indices[c],
                    )
                )

        return triangles

    def trim(
        self,
        triangles: Sequence[int],
        points: Sequence[float],
        hull: Sequence[float],
    ) -> list[int]:
        """Drop triangles whose centroid lies outside a polygon.

        Useful to carve a concave outline out of a Delaunay triangulation, which
        always covers the convex hull.

        Args:
            triangles: Flat triangle index buffer, stride 3
            points: Flat x/y buffer the triangles index into
            hull: Flat x/y buffer of the outline to keep

        Returns:
            The surviving triangles, in their original order
        """
        kept: list[int] = []
        for i in range(0, len(triangles) - 2, 3):
            p1 = triangles[i] * 2
            p2 = triangles[i + 1] * 2
            p3 = triangles[i + 2] * 2

            cx, cy = triangle_centroid(
                points[p1], points[p1 + 1],
                points[p2], points[p2 + 1],
                points[p3], points[p3 + 1],
            )

            if point_in_polygon(hull, cx, cy):
                kept.extend((triangles[i], triangles[i + 1], triangles[i + 2]))

        return kept

    def _reset(self) -> None:
        """Clear scratch state from the previous call."""
        self._sorted_points.clear()
        self._original_indices.clear()
        self._triangles.clear()
        self._states.clear()
        self._edges.clear()

    def _super_triangle(self, coords: Sequence[float]) -> list[float]:
        """Coordinates of a triangle strictly enclosing the bounding box."""
        xs = coords[0::2]
        ys = coords[1::2]
        xmin, xmax = min(xs), max(xs)
        ymin, ymax = min(ys), max(ys)

        dmax = max(xmax - xmin, ymax - ymin) * self.config.super_triangle_margin
        xmid = (xmax + xmin) / 2
        ymid = (ymax + ymin) / 2

        return [
            xmid - dmax, ymid - dmax,
            xmid, ymid + dmax,
            xmid + dmax, ymid - dmax,
        ]

    def _insert(self, coords: Sequence[float], position: int) -> None:
        """Insert one point, replacing every triangle whose circle holds it."""
        x = coords[2 * position]
        y = coords[2 * position + 1]
        epsilon = self.config.epsilon

        kept_triangles: list[tuple[int, int, int]] = []
        kept_states: list[TriangleState] = []

        for triangle, state in zip(self._triangles, self._states):
            if state is TriangleState.COMPLETE:
                kept_triangles.append(triangle)
                kept_states.append(state)
                continue

            p1, p2, p3 = triangle
            test = classify_circumcircle(
                x,
                y,
                coords[2 * p1], coords[2 * p1 + 1],
                coords[2 * p2], coords[2 * p2 + 1],
                coords[2 * p3], coords[2 * p3 + 1],
                epsilon,
            )

            if test is CircleTest.INSIDE:
                self._add_edge(p1, p2)
                self._add_edge(p2, p3)
                self._add_edge(p3, p1)
                continue

            kept_triangles.append(triangle)
            if test is CircleTest.COMPLETE:
                kept_states.append(TriangleState.COMPLETE)
            else:
                kept_states.append(TriangleState.ACTIVE)

        # Surviving edges bound the hole; fan them to the new point.
        for a, b in self._edges.values():
            kept_triangles.append((a, b, position))
            kept_states.append(TriangleState.ACTIVE)

        self._edges.clear()
        self._triangles[:] = kept_triangles
        self._states[:] = kept_states

    def _add_edge(self, a: int, b: int) -> None:
        """Record a hole edge, cancelling it if the reverse edge is pending."""
        key = (a, b) if a < b else (b, a)
        if key in self._edges:
            del self._edges[key]
        else:
            self._edges[key] = (a, b)
