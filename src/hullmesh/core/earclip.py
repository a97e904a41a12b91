"""Ear-clipping triangulation of simple polygons.

The polygon is first brought to clockwise order, then convex vertices whose
triangle holds no other vertex ("ears") are cut off one at a time until three
vertices remain. Each cut re-classifies the two neighbours of the removed
vertex, since their convexity may have changed.

There are O(n) ears, each found with an O(n) scan, so the whole run is O(n^2).
That is fine for outlines of tens to a few hundred vertices.
"""

from collections.abc import Sequence

from hullmesh.config import GeometryConfig
from hullmesh.core.geometry import is_clockwise, spanned_area_sign
from hullmesh.domain import VertexType, point_count


class EarClippingTriangulator:
    """Triangulates a simple (convex or concave) polygon.

    A polygon with n vertices always yields n - 2 triangles. Triangles are
    emitted with clockwise winding (negative signed area in a y-up frame).

    On near-degenerate outlines no proper ear may exist; a convex or tangential
    vertex is then cut anyway so the run always finishes. ``fallback_count``
    tells how often that happened during the most recent call.

    The instance keeps scratch buffers between calls; they are cleared on every
    call, but an instance must not be shared between threads.

    Example:
        triangulator = EarClippingTriangulator()
        triangulator.compute_triangles([0, 0, 1, 0, 1, 1, 0, 1])
        # [0, 3, 2, 2, 1, 0]
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        """Initialize the triangulator.

        Args:
            config: Geometry settings (defaults used if None)
        """
        self.config = config or GeometryConfig()
        self.fallback_count = 0
        self._vertices: Sequence[float] = ()
        self._indices: list[int] = []
        self._vertex_types: list[VertexType] = []
        self._triangles: list[int] = []

    def compute_triangles(self, vertices: Sequence[float]) -> list[int]:
        """Triangulate a polygon into a list of triangle vertex indices.

        Args:
            vertices: Flat x/y buffer describing the polygon outline, in either
                clockwise or counter-clockwise order

        Returns:
            Flat index buffer of ``3 * (n - 2)`` indices into ``vertices``,
            each triple in clockwise order

        Raises:
            InvalidInputSizeError: If the buffer length is odd, describes fewer
                than three vertices, or exceeds the index cap
        """
        vertex_count = point_count(vertices, min_points=3, max_points=self.config.max_points)

        self._vertices = vertices
        self.fallback_count = 0
        self._triangles.clear()

        self._indices.clear()
        if is_clockwise(vertices):
            self._indices.extend(range(vertex_count))
        else:
            self._indices.extend(range(vertex_count - 1, -1, -1))

        self._vertex_types.clear()
        self._vertex_types.extend(self._classify_vertex(i) for i in range(vertex_count))

        try:
            self._triangulate()
            return list(self._triangles)
        finally:
            self._vertices = ()

    def _triangulate(self) -> None:
        """Clip ears until a single triangle is left."""
        while len(self._indices) > 3:
            ear_tip = self._find_ear_tip()
            self._cut_ear_tip(ear_tip)

            # The type of the two vertices adjacent to the clipped vertex may have changed.
            previous = self._previous_index(ear_tip)
            following = 0 if ear_tip == len(self._indices) else ear_tip
            self._vertex_types[previous] = self._classify_vertex(previous)
            self._vertex_types[following] = self._classify_vertex(following)

        self._triangles.extend(self._indices)

    def _classify_vertex(self, index: int) -> VertexType:
        """Classify the vertex at ``index`` of the working outline."""
        vertices = self._vertices
        previous = self._indices[self._previous_index(index)] * 2
        current = self._indices[index] * 2
        following = self._indices[self._next_index(index)] * 2

        return VertexType.from_sign(
            spanned_area_sign(
                vertices[previous], vertices[previous + 1],
                vertices[current], vertices[current + 1],
                vertices[following], vertices[following + 1],
            )
        )

    def _find_ear_tip(self) -> int:
        """Return the position of the next vertex to clip."""
        for i in range(len(self._indices)):
            if self._is_ear_tip(i):
                return i

        # No ear: the outline is degenerate, possibly only after earlier clips.
        # Fall back to a convex or tangential vertex (see Held, "FIST", 1998).
        self.fallback_count += 1
        for i, vertex_type in enumerate(self._vertex_types):
            if vertex_type is not VertexType.CONCAVE:
                return i

        return 0

    def _is_ear_tip(self, ear_tip: int) -> bool:
        """Check that the vertex is convex and its triangle holds no other vertex."""
        if self._vertex_types[ear_tip] is VertexType.CONCAVE:
            return False

        vertices = self._vertices
        previous = self._previous_index(ear_tip)
        following = self._next_index(ear_tip)
        p1 = self._indices[previous] * 2
        p2 = self._indices[ear_tip] * 2
        p3 = self._indices[following] * 2
        p1x, p1y = vertices[p1], vertices[p1 + 1]
        p2x, p2y = vertices[p2], vertices[p2 + 1]
        p3x, p3y = vertices[p3], vertices[p3 + 1]

        i = self._next_index(following)
        while i != previous:
            # Concave vertices can sit inside the candidate ear, and so can
            # tangential ones that coincide with a triangle corner.
            if self._vertex_types[i] is not VertexType.CONVEX:
                v = self._indices[i] * 2
                vx, vy = vertices[v], vertices[v + 1]

                # Clockwise winding: positive inside, zero on an edge. The p3->p1
                # edge rejects most often, so it goes first.
                if (
                    spanned_area_sign(p3x, p3y, p1x, p1y, vx, vy) >= 0
                    and spanned_area_sign(p1x, p1y, p2x, p2y, vx, vy) >= 0
                    and spanned_area_sign(p2x, p2y, p3x, p3y, vx, vy) >= 0
                ):
                    return False

            i = self._next_index(i)

        return True

    def _cut_ear_tip(self, ear_tip: int) -> None:
        """Emit the ear triangle and drop its tip from the working outline."""
        self._triangles.append(self._indices[self._previous_index(ear_tip)])
        self._triangles.append(self._indices[ear_tip])
        self._triangles.append(self._indices[self._next_index(ear_tip)])

        del self._indices[ear_tip]
        del self._vertex_types[ear_tip]

    def _previous_index(self, index: int) -> int:
        return (len(self._indices) if index == 0 else index) - 1

    def _next_index(self, index: int) -> int:
        return (index + 1) % len(self._indices)
