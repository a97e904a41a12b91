"""Tests for parallel batch triangulation."""

from unittest.mock import MagicMock

import pytest
import structlog

from hullmesh.config import GeometryConfig, HullmeshSettings, ProcessingConfig
from hullmesh.core.processor import PolygonBatchProcessor, triangulate_polygon
from hullmesh.domain import Polygon, PolygonTriangulation
from hullmesh.exceptions import InputError


@pytest.fixture
def square() -> Polygon:
    return Polygon(name="square", vertices=(0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0))


@pytest.fixture
def l_shape() -> Polygon:
    return Polygon(
        name="l_shape",
        vertices=(0.0, 0.0, 2.0, 0.0, 2.0, 1.0, 1.0, 1.0, 1.0, 2.0, 0.0, 2.0),
    )


@pytest.fixture
def settings() -> HullmeshSettings:
    return HullmeshSettings(processing=ProcessingConfig(max_workers=2))


class TestTriangulatePolygon:
    """Tests for the picklable worker function."""

    def test_success(self, square):
        result = triangulate_polygon(square.to_dict(), GeometryConfig().model_dump())

        assert "error" not in result
        triangulation = PolygonTriangulation.from_dict(result)
        assert triangulation.name == "square"
        assert triangulation.indices == [0, 3, 2, 2, 1, 0]
        assert triangulation.fallback_count == 0
        assert triangulation.duration_ms >= 0

    def test_degenerate_polygon(self):
        polygon = Polygon(name="flat", vertices=(0.0, 0.0, 1.0, 0.0, 2.0, 0.0, 3.0, 0.0))
        result = triangulate_polygon(polygon.to_dict(), GeometryConfig().model_dump())

        triangulation = PolygonTriangulation.from_dict(result)
        assert triangulation.degenerate
        assert triangulation.triangle_count == 2

    def test_error_is_returned(self):
        polygon = Polygon(name="segment", vertices=(0.0, 0.0, 1.0, 1.0))
        result = triangulate_polygon(polygon.to_dict(), GeometryConfig().model_dump())

        assert result["polygon_name"] == "segment"
        assert "at least 3" in result["error"]
        assert "Traceback" in result["traceback"]


class TestPolygonBatchProcessor:
    """Tests for PolygonBatchProcessor."""

    def test_process_batch(self, settings, square, l_shape):
        processor = PolygonBatchProcessor(settings, logger=structlog.get_logger())
        results, stats = processor.process([square, l_shape])

        assert set(results) == {"square", "l_shape"}
        assert results["square"].triangle_count == 2
        assert results["l_shape"].triangle_count == 4
        assert stats.processed_count == 2
        assert stats.error_count == 0
        assert stats.triangles_emitted == 6
        assert len(stats.polygon_timings_ms) == 2
        assert stats.duration_seconds >= 0

    def test_errors_are_counted(self, settings, square):
        bad = Polygon(name="bad", vertices=(0.0, 0.0, 1.0, 1.0))
        processor = PolygonBatchProcessor(settings, logger=structlog.get_logger())
        results, stats = processor.process([square, bad], max_workers=1)

        assert set(results) == {"square"}
        assert stats.error_count == 1
        assert stats.errors[0][0] == "bad"

    def test_degenerate_polygons_are_counted(self, settings):
        flat = Polygon(name="flat", vertices=(0.0, 0.0, 1.0, 0.0, 2.0, 0.0, 3.0, 0.0))
        processor = PolygonBatchProcessor(settings, logger=structlog.get_logger())
        results, stats = processor.process([flat], max_workers=1)

        assert results["flat"].degenerate
        assert stats.degenerate_count == 1
        assert stats.processed_count == 1

    def test_progress_callback(self, settings, square, l_shape):
        calls = []
        processor = PolygonBatchProcessor(settings, logger=structlog.get_logger())
        processor.process(
            [square, l_shape],
            progress_callback=lambda *args: calls.append(args),
        )

        assert [call[0] for call in calls] == [1, 2]
        assert all(call[1] == 2 for call in calls)
        assert {call[2] for call in calls} == {"square", "l_shape"}
        assert all(call[3] for call in calls)

    def test_timing_range(self, settings, square, l_shape):
        processor = PolygonBatchProcessor(settings, logger=structlog.get_logger())
        _, stats = processor.process([square, l_shape])

        assert stats.min_polygon_time_ms <= stats.avg_polygon_time_ms <= stats.max_polygon_time_ms

    def test_interrupt_keeps_partial_stats(self, settings, square, l_shape):
        """Stats of an interrupted run stay reachable on the processor."""
        triangle = Polygon(name="triangle", vertices=(0.0, 0.0, 1.0, 0.0, 0.0, 1.0))
        processor = PolygonBatchProcessor(settings, logger=structlog.get_logger())

        def interrupt_after_first(completed, *_):
            if completed == 1:
                raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            processor.process(
                [square, l_shape, triangle],
                max_workers=1,
                progress_callback=interrupt_after_first,
            )

        assert processor.stats.processed_count == 1
        assert processor.stats.cancelled_count == 2
        assert processor.stats.end_time is not None

    def test_stats_before_first_run(self, settings):
        processor = PolygonBatchProcessor(settings, logger=MagicMock())
        assert processor.stats.processed_count == 0
        assert processor.stats.cancelled_count == 0

    def test_empty_batch(self, settings):
        logger = MagicMock()
        processor = PolygonBatchProcessor(settings, logger=logger)
        results, stats = processor.process([])

        assert results == {}
        assert stats.processed_count == 0
        logger.info.assert_any_call("No polygons to process")

    def test_duplicate_names_rejected(self, settings, square):
        processor = PolygonBatchProcessor(settings, logger=MagicMock())
        with pytest.raises(InputError):
            processor.process([square, square])
