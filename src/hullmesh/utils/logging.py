"""Logging utilities for Hullmesh."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from a batch triangulation run."""

    processed_count: int = 0
    error_count: int = 0
    triangles_emitted: int = 0
    degenerate_count: int = 0
    cancelled_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    polygon_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_polygon_time_ms(self) -> float | None:
        """Average time per polygon, None before any polygon finished."""
        if not self.polygon_timings_ms:
            return None
        return sum(self.polygon_timings_ms) / len(self.polygon_timings_ms)

    @property
    def min_polygon_time_ms(self) -> float | None:
        """Fastest polygon time."""
        return min(self.polygon_timings_ms) if self.polygon_timings_ms else None

    @property
    def max_polygon_time_ms(self) -> float | None:
        """Slowest polygon time."""
        return max(self.polygon_timings_ms) if self.polygon_timings_ms else None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"hullmesh_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("hullmesh")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class ProcessingLogger:
    """Logger for tracking batch progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_polygon_start(self, name: str, vertex_count: int) -> None:
        """Log start of polygon triangulation."""
        self._logger.debug("Triangulating polygon", polygon=name, vertices=vertex_count)

    def log_polygon_complete(
        self,
        name: str,
        triangles: int,
        duration_ms: float,
    ) -> None:
        """Log successful polygon triangulation."""
        self._logger.info(
            "Polygon triangulated",
            polygon=name,
            triangles=triangles,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.triangles_emitted += triangles

    def log_polygon_degenerate(self, name: str, fallback_count: int) -> None:
        """Log a polygon whose triangulation needed the no-ear fallback."""
        self._logger.warning(
            "No ear found, clipped a non-ear vertex",
            polygon=name,
            fallback_count=fallback_count,
        )
        self._stats.degenerate_count += 1

    def log_polygon_error(
        self,
        name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log polygon triangulation error."""
        self._logger.error(
            "Polygon triangulation failed",
            polygon=name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((name, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
