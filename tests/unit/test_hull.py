"""Unit tests for monotone chain convex hull construction."""

import pytest

from hullmesh.config import GeometryConfig
from hullmesh.core.hull import ConvexHull
from hullmesh.exceptions import InvalidInputSizeError


@pytest.fixture
def hull() -> ConvexHull:
    return ConvexHull()


class TestComputePolygon:
    """Tests for ConvexHull.compute_polygon."""

    def test_unit_square(self, hull):
        """Scrambled square corners come back counter-clockwise from the min point."""
        assert hull.compute_polygon([1, 1, 0, 0, 1, 0, 0, 1]) == [0, 0, 1, 0, 1, 1, 0, 1]

    def test_interior_point_excluded(self, hull):
        result = hull.compute_polygon([0, 0, 1, 0, 1, 1, 0, 1, 0.5, 0.5])
        assert result == [0, 0, 1, 0, 1, 1, 0, 1]

    def test_edge_midpoint_excluded(self, hull):
        """Points on a hull edge are not hull vertices."""
        result = hull.compute_polygon([0, 0, 1, 0, 2, 0, 2, 2, 0, 2])
        assert result == [0, 0, 2, 0, 2, 2, 0, 2]

    def test_collinear_input(self, hull):
        """Collinear points yield the two extremes."""
        assert hull.compute_polygon([1, 0, 0, 0, 2, 0]) == [0, 0, 2, 0]

    def test_triangle(self, hull):
        assert hull.compute_polygon([0, 0, 0, 1, 1, 0]) == [0, 0, 1, 0, 0, 1]

    def test_fewer_than_three_points(self, hull):
        assert hull.compute_polygon([]) == []
        assert hull.compute_polygon([3, 4]) == [3, 4]
        assert hull.compute_polygon([1, 1, 0, 0]) == [0, 0, 1, 1]

    def test_presorted_input(self, hull):
        result = hull.compute_polygon([0, 0, 0, 1, 1, 0, 1, 1], is_sorted=True)
        assert result == [0, 0, 1, 0, 1, 1, 0, 1]

    def test_input_not_modified(self, hull):
        points = [1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0]
        hull.compute_polygon(points)
        assert points == [1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0]

    def test_odd_buffer(self, hull):
        with pytest.raises(InvalidInputSizeError):
            hull.compute_polygon([0, 0, 1])


class TestComputeIndices:
    """Tests for ConvexHull.compute_indices."""

    def test_indices_refer_to_input(self, hull):
        assert hull.compute_indices([1, 1, 0, 0, 1, 0, 0, 1]) == [1, 2, 0, 3]

    def test_interior_point_excluded(self, hull):
        assert hull.compute_indices([0, 0, 1, 0, 1, 1, 0, 1, 0.5, 0.5]) == [0, 1, 2, 3]

    def test_presorted_input(self, hull):
        """With sorted input the indices are positions in the input."""
        assert hull.compute_indices([0, 0, 0, 1, 1, 0, 1, 1], is_sorted=True) == [0, 2, 3, 1]

    def test_empty(self, hull):
        assert hull.compute_indices([]) == []

    def test_index_cap(self, hull):
        points = [float(i % 2) for i in range(2 * 32768)]
        with pytest.raises(InvalidInputSizeError) as exc_info:
            hull.compute_indices(points)
        assert exc_info.value.count == 32768

    def test_configured_cap(self):
        hull = ConvexHull(GeometryConfig(max_points=3))
        with pytest.raises(InvalidInputSizeError):
            hull.compute_indices([0, 0, 1, 0, 1, 1, 0, 1])


class TestScratchReuse:
    """Tests that one instance can be reused across calls."""

    def test_results_are_independent(self, hull):
        first = hull.compute_indices([1, 1, 0, 0, 1, 0, 0, 1])
        second = hull.compute_indices([0, 0, 4, 0, 2, 3])
        assert first == [1, 2, 0, 3]
        assert second == [0, 1, 2]

    def test_polygon_then_indices(self, hull):
        polygon = hull.compute_polygon([0, 0, 4, 0, 2, 3, 2, 1])
        indices = hull.compute_indices([0, 0, 4, 0, 2, 3, 2, 1])
        assert polygon == [0, 0, 4, 0, 2, 3]
        assert indices == [0, 1, 2]
