"""Unit tests for incremental Delaunay triangulation.

Tests cover:
- Circumcircle classification, including horizontal and collinear cases
- Triangulation of small point sets
- Winding of emitted triangles
- Trimming against an outline
"""

import pytest

from hullmesh.config import GeometryConfig
from hullmesh.core.delaunay import DelaunayTriangulator, classify_circumcircle
from hullmesh.core.geometry import triangle_signed_area
from hullmesh.domain import CircleTest
from hullmesh.exceptions import InvalidInputSizeError

SQUARE_WITH_CENTER = [0, 0, 1, 0, 1, 1, 0, 1, 0.5, 0.5]


def signed_areas(triangles, points):
    areas = []
    for i in range(0, len(triangles), 3):
        a, b, c = (2 * t for t in triangles[i : i + 3])
        areas.append(
            triangle_signed_area(
                points[a], points[a + 1], points[b], points[b + 1], points[c], points[c + 1]
            )
        )
    return areas


@pytest.fixture
def triangulator() -> DelaunayTriangulator:
    return DelaunayTriangulator()


class TestClassifyCircumcircle:
    """Tests for classify_circumcircle."""

    def test_point_inside(self):
        # Circle through (0,0), (2,0), (0,2) is centered at (1,1).
        assert classify_circumcircle(1, 1, 0, 0, 0, 2, 2, 0) is CircleTest.INSIDE

    def test_point_on_circle_counts_as_inside(self):
        assert classify_circumcircle(2, 2, 0, 0, 0, 2, 2, 0) is CircleTest.INSIDE

    def test_point_right_of_circle(self):
        assert classify_circumcircle(5, 1, 0, 0, 0, 2, 2, 0) is CircleTest.COMPLETE

    def test_point_outside_but_not_past(self):
        """Outside the circle but above it, later points may still fall inside."""
        assert classify_circumcircle(1, 5, 0, 0, 0, 2, 2, 0) is CircleTest.INCOMPLETE

    def test_first_edge_horizontal(self):
        assert classify_circumcircle(1, 1, 0, 0, 2, 0, 0, 2) is CircleTest.INSIDE

    def test_second_edge_horizontal(self):
        assert classify_circumcircle(1, 1, 0, 2, 0, 0, 2, 0) is CircleTest.INSIDE

    def test_all_horizontal(self):
        assert classify_circumcircle(1, 0, 0, 0, 1, 0, 2, 0) is CircleTest.INCOMPLETE

    def test_collinear_sloped(self):
        assert classify_circumcircle(5, 5, 0, 0, 1, 1, 2, 2) is CircleTest.INCOMPLETE


class TestComputeTriangles:
    """Tests for DelaunayTriangulator.compute_triangles."""

    def test_square_with_center(self, triangulator):
        """Four triangles fan around the center point."""
        triangles = triangulator.compute_triangles(SQUARE_WITH_CENTER)
        assert len(triangles) == 12
        for i in range(0, 12, 3):
            assert 4 in triangles[i : i + 3]

        corner_edges = set()
        for i in range(0, 12, 3):
            corners = sorted(t for t in triangles[i : i + 3] if t != 4)
            corner_edges.add(tuple(corners))
        assert corner_edges == {(0, 1), (1, 2), (2, 3), (0, 3)}

    def test_single_triangle(self, triangulator):
        triangles = triangulator.compute_triangles([0, 0, 4, 0, 2, 3])
        assert sorted(triangles) == [0, 1, 2]

    def test_negative_winding(self, triangulator):
        triangles = triangulator.compute_triangles(SQUARE_WITH_CENTER)
        assert all(area < 0 for area in signed_areas(triangles, SQUARE_WITH_CENTER))

    def test_fewer_than_three_points(self, triangulator):
        assert triangulator.compute_triangles([]) == []
        assert triangulator.compute_triangles([0, 0, 1, 1]) == []

    def test_collinear_points_do_not_raise(self, triangulator):
        triangles = triangulator.compute_triangles([0, 0, 1, 0, 2, 0])
        assert len(triangles) % 3 == 0
        assert all(0 <= t < 3 for t in triangles)

    def test_presorted_input(self, triangulator):
        points = [0, 0, 0, 1, 0.5, 0.5, 1, 0, 1, 1]
        triangles = triangulator.compute_triangles(points, is_sorted=True)
        assert len(triangles) == 12
        for i in range(0, 12, 3):
            assert 2 in triangles[i : i + 3]

    def test_input_not_modified(self, triangulator):
        points = list(SQUARE_WITH_CENTER)
        triangulator.compute_triangles(points)
        assert points == SQUARE_WITH_CENTER

    def test_reuse_gives_same_result(self, triangulator):
        first = triangulator.compute_triangles(SQUARE_WITH_CENTER)
        triangulator.compute_triangles([0, 0, 4, 0, 2, 3])
        second = triangulator.compute_triangles(SQUARE_WITH_CENTER)
        assert first == second

    def test_odd_buffer(self, triangulator):
        with pytest.raises(InvalidInputSizeError):
            triangulator.compute_triangles([0, 0, 1, 0, 1])

    def test_index_cap(self):
        triangulator = DelaunayTriangulator(GeometryConfig(max_points=4))
        with pytest.raises(InvalidInputSizeError):
            triangulator.compute_triangles(SQUARE_WITH_CENTER)


class TestTrim:
    """Tests for DelaunayTriangulator.trim."""

    def test_keeps_triangles_inside_outline(self, triangulator):
        triangles = triangulator.compute_triangles(SQUARE_WITH_CENTER)
        lower_band = [-1, -1, 2, -1, 2, 0.4, -1, 0.4]

        kept = triangulator.trim(triangles, SQUARE_WITH_CENTER, lower_band)

        assert len(kept) == 3
        assert sorted(kept) == [0, 1, 4]

    def test_keeps_everything_inside_hull(self, triangulator):
        triangles = triangulator.compute_triangles(SQUARE_WITH_CENTER)
        hull = [0, 0, 1, 0, 1, 1, 0, 1]
        assert triangulator.trim(triangles, SQUARE_WITH_CENTER, hull) == triangles

    def test_empty(self, triangulator):
        assert triangulator.trim([], SQUARE_WITH_CENTER, [0, 0, 1, 0, 1, 1]) == []
