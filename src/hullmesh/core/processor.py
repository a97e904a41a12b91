"""Parallel batch triangulation of many polygons.

Triangulator instances are not thread-safe, so batches are spread over worker
processes that each build their own instance per polygon.

Key components:
- triangulate_polygon: Top-level picklable function for parallel execution
- PolygonBatchProcessor: Orchestrator that fans polygons out and collects results
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from typing import Any

import structlog

from hullmesh.config import GeometryConfig, HullmeshSettings
from hullmesh.core.earclip import EarClippingTriangulator
from hullmesh.domain import Polygon, PolygonTriangulation
from hullmesh.exceptions import InputError
from hullmesh.utils import ProcessingLogger, ProcessingStats, configure_logging


def triangulate_polygon(
    polygon_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ear-clip a single polygon.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        polygon_dict: Serialized polygon (from Polygon.to_dict())
        config_dict: Serialized geometry configuration

    Returns:
        Dictionary containing either:
        - Success: PolygonTriangulation.to_dict()
        - Error: {"error": str, "polygon_name": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        polygon = Polygon.from_dict(polygon_dict)
        triangulator = EarClippingTriangulator(GeometryConfig(**config_dict))
        indices = triangulator.compute_triangles(polygon.vertices)

        result = PolygonTriangulation(
            name=polygon.name,
            indices=indices,
            fallback_count=triangulator.fallback_count,
            duration_ms=(time.time() - start_time) * 1000,
        )
        return result.to_dict()

    except Exception as e:
        return {
            "error": str(e),
            "polygon_name": polygon_dict.get("name", "unknown"),
            "traceback": traceback.format_exc(),
            "duration_ms": (time.time() - start_time) * 1000,
        }


class PolygonBatchProcessor:
    """Orchestrates parallel ear clipping of a batch of polygons.

    ``stats`` holds the statistics of the most recent run, also after it was
    interrupted.

    Example:
        processor = PolygonBatchProcessor(HullmeshSettings())
        results, stats = processor.process(polygons, max_workers=4)
    """

    def __init__(
        self,
        config: HullmeshSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            config: Hullmesh settings with geometry and processing config
            logger: Logger to use (configured from ``config.logging`` if None)
        """
        self.config = config
        if logger is None:
            logger = configure_logging(
                log_file=config.logging.log_file,
                console_level=config.logging.log_level,
                file_level=config.logging.file_log_level,
                quiet=False,
            )
        self.logger = logger
        self.stats = ProcessingStats()

    def process(
        self,
        polygons: Sequence[Polygon],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> tuple[dict[str, PolygonTriangulation], ProcessingStats]:
        """Triangulate polygons in parallel.

        Failures of individual polygons are logged and counted, not raised.

        Args:
            polygons: Polygons to triangulate, names must be unique
            max_workers: Maximum worker processes (None = config, then auto)
            progress_callback: Optional callback(completed, total, name, success)

        Returns:
            Tuple of (results by polygon name, statistics)

        Raises:
            InputError: If two polygons share a name
            KeyboardInterrupt: If processing is cancelled by user
        """
        names = [polygon.name for polygon in polygons]
        if len(set(names)) != len(names):
            raise InputError("Polygon names must be unique within a batch")

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        self.stats = stats
        stats.start_time = time.time()

        self.logger.info(
            "Starting batch triangulation",
            polygon_count=len(polygons),
            max_workers=max_workers,
        )

        results: dict[str, PolygonTriangulation] = {}
        if polygons:
            results = self._process_parallel(
                polygons=polygons,
                max_workers=max_workers,
                processing_logger=processing_logger,
                progress_callback=progress_callback,
            )
        else:
            self.logger.info("No polygons to process")

        stats.end_time = time.time()

        self.logger.info(
            "Batch triangulation complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            degenerate=stats.degenerate_count,
            triangles=stats.triangles_emitted,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return results, stats

    def _process_parallel(
        self,
        polygons: Sequence[Polygon],
        max_workers: int | None,
        processing_logger: ProcessingLogger,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> dict[str, PolygonTriangulation]:
        """Triangulate polygons using ProcessPoolExecutor.

        Args:
            polygons: Polygons to triangulate
            max_workers: Maximum worker processes
            processing_logger: Logger that also accumulates stats
            progress_callback: Optional callback(completed, total, name, success)

        Returns:
            Dictionary mapping polygon names to their triangulations
        """
        results: dict[str, PolygonTriangulation] = {}
        stats = processing_logger.stats

        # Serialize configuration for workers
        config_dict = self.config.geometry.model_dump()

        total = len(polygons)
        completed = 0
        pending_futures: dict[Future[dict[str, Any]], str] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for polygon in polygons:
                processing_logger.log_polygon_start(polygon.name, polygon.vertex_count)
                future = executor.submit(triangulate_polygon, polygon.to_dict(), config_dict)
                pending_futures[future] = polygon.name

            try:
                for future in as_completed(pending_futures):
                    name = pending_futures.pop(future)
                    success = False

                    try:
                        result = future.result()

                        if "error" in result:
                            processing_logger.log_polygon_error(
                                name=result["polygon_name"],
                                error=Exception(result["error"]),
                                traceback=result.get("traceback"),
                            )
                        else:
                            success = True
                            triangulation = PolygonTriangulation.from_dict(result)
                            results[name] = triangulation

                            if triangulation.degenerate:
                                processing_logger.log_polygon_degenerate(
                                    name, triangulation.fallback_count
                                )

                            processing_logger.log_polygon_complete(
                                name=name,
                                triangles=triangulation.triangle_count,
                                duration_ms=triangulation.duration_ms,
                            )
                            stats.polygon_timings_ms.append(triangulation.duration_ms)

                    except Exception as e:
                        # Executor-level error
                        processing_logger.log_polygon_error(
                            name=name,
                            error=e,
                            traceback=traceback.format_exc(),
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, name, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.cancelled_count = len(pending_futures)
                stats.end_time = time.time()

                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return results
