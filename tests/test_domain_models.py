"""Tests for domain models to verify they work correctly."""

import pytest

from hullmesh.domain import (
    CircleTest,
    PointSet,
    Polygon,
    PolygonTriangulation,
    Triangle,
    TriangleState,
    VertexType,
    WindingDirection,
    flatten_triangles,
    point_count,
    triangles_from_indices,
)
from hullmesh.exceptions import InvalidInputSizeError


class TestPointCount:
    """Tests for flat buffer validation."""

    def test_even_buffer(self) -> None:
        """Test point count of a valid buffer."""
        assert point_count([0.0, 0.0, 1.0, 1.0]) == 2

    def test_empty_buffer(self) -> None:
        """Test empty buffers describe zero points."""
        assert point_count([]) == 0

    def test_odd_buffer_rejected(self) -> None:
        """Test odd-length buffers raise."""
        with pytest.raises(InvalidInputSizeError, match="even"):
            point_count([0.0, 0.0, 1.0])

    def test_min_points(self) -> None:
        """Test lower bound on point count."""
        with pytest.raises(InvalidInputSizeError, match="at least 3"):
            point_count([0.0, 0.0, 1.0, 1.0], min_points=3)

    def test_max_points(self) -> None:
        """Test upper bound on point count."""
        with pytest.raises(InvalidInputSizeError) as exc_info:
            point_count([0.0] * 8, max_points=3)
        assert exc_info.value.count == 4

    def test_max_points_inclusive(self) -> None:
        """Test that the upper bound itself is accepted."""
        assert point_count([0.0] * 6, max_points=3) == 3


class TestPointSet:
    """Tests for PointSet class."""

    def test_from_pairs(self) -> None:
        """Test building from (x, y) pairs."""
        points = PointSet.from_pairs([(0, 1), (2, 3)])
        assert points.coords == (0.0, 1.0, 2.0, 3.0)
        assert len(points) == 2

    def test_point_access(self) -> None:
        """Test indexed point access."""
        points = PointSet.from_flat([0, 1, 2, 3])
        assert points.point(1) == (2.0, 3.0)
        with pytest.raises(IndexError):
            points.point(2)

    def test_to_pairs(self) -> None:
        """Test conversion back to pairs."""
        points = PointSet.from_flat([0, 1, 2, 3])
        assert points.to_pairs() == [(0.0, 1.0), (2.0, 3.0)]

    def test_bounding_box(self) -> None:
        """Test bounding box."""
        points = PointSet.from_pairs([(1, 5), (-2, 3), (4, -1)])
        assert points.bounding_box() == (-2.0, -1.0, 4.0, 5.0)

    def test_bounding_box_empty(self) -> None:
        """Test bounding box of an empty set."""
        assert PointSet(()).bounding_box() == (0.0, 0.0, 0.0, 0.0)

    def test_odd_coords_rejected(self) -> None:
        """Test that construction validates the buffer."""
        with pytest.raises(InvalidInputSizeError):
            PointSet((1.0, 2.0, 3.0))

    def test_serialization(self) -> None:
        """Test dict serialization and deserialization."""
        points = PointSet.from_flat([0, 1, 2, 3])
        assert PointSet.from_dict(points.to_dict()) == points

    def test_immutable(self) -> None:
        """Test that point sets are immutable."""
        points = PointSet.from_flat([0, 1])
        with pytest.raises(AttributeError):
            points.coords = (2.0, 3.0)  # type: ignore


class TestTriangle:
    """Tests for Triangle and index buffer helpers."""

    def test_edges(self) -> None:
        """Test directed edges follow winding order."""
        assert Triangle(0, 1, 2).edges() == ((0, 1), (1, 2), (2, 0))

    def test_triangles_from_indices(self) -> None:
        """Test grouping a flat buffer."""
        triangles = triangles_from_indices([0, 1, 2, 2, 3, 0])
        assert triangles == [Triangle(0, 1, 2), Triangle(2, 3, 0)]

    def test_triangles_from_bad_buffer(self) -> None:
        """Test non-multiple-of-3 buffers raise."""
        with pytest.raises(InvalidInputSizeError):
            triangles_from_indices([0, 1])

    def test_flatten(self) -> None:
        """Test flattening triangles."""
        assert flatten_triangles([Triangle(0, 1, 2), Triangle(3, 4, 5)]) == [0, 1, 2, 3, 4, 5]


class TestEnums:
    """Tests for classification enums."""

    def test_winding_from_area(self) -> None:
        """Test winding classification by signed area."""
        assert WindingDirection.from_area(-1.0) == WindingDirection.CLOCKWISE
        assert WindingDirection.from_area(1.0) == WindingDirection.COUNTER_CLOCKWISE

    def test_vertex_type_from_sign(self) -> None:
        """Test vertex classification from area sign."""
        assert VertexType.from_sign(1) is VertexType.CONVEX
        assert VertexType.from_sign(-1) is VertexType.CONCAVE
        assert VertexType.from_sign(0) is VertexType.TANGENTIAL

    def test_states_are_distinct(self) -> None:
        """Test triangle states and circle tests are separate values."""
        assert TriangleState.ACTIVE != TriangleState.COMPLETE
        assert len({CircleTest.INSIDE, CircleTest.COMPLETE, CircleTest.INCOMPLETE}) == 3


class TestPolygonRecords:
    """Tests for batch records."""

    def test_polygon_serialization(self) -> None:
        """Test polygon round trip through a dict."""
        polygon = Polygon(name="square", vertices=(0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0))
        restored = Polygon.from_dict(polygon.to_dict())
        assert restored == polygon
        assert restored.vertex_count == 4

    def test_triangulation_properties(self) -> None:
        """Test derived properties of a triangulation."""
        result = PolygonTriangulation(name="a", indices=[0, 1, 2, 2, 3, 0], fallback_count=1)
        assert result.triangle_count == 2
        assert result.degenerate

    def test_triangulation_defaults(self) -> None:
        """Test a clean triangulation is not degenerate."""
        result = PolygonTriangulation.from_dict({"name": "a", "indices": [0, 1, 2]})
        assert not result.degenerate
        assert result.duration_ms == 0.0
