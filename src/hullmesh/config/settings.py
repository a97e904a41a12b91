"""Configuration settings for Hullmesh."""

from pathlib import Path

from pydantic import BaseModel, Field

# Largest point count whose indices fit a signed 16-bit buffer.
MAX_INDEXED_POINTS = 32767


class GeometryConfig(BaseModel):
    """Configuration for the geometric algorithms.

    Tolerances are absolute and apply to squared distances and cross products,
    so inputs with very large or very small coordinates may want a scaled value.
    """

    epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Tolerance for circumcircle and collinearity tests",
    )
    super_triangle_margin: float = Field(
        default=20.0,
        ge=2.0,
        le=1000.0,
        description="Super-triangle size as a multiple of the larger bounding-box side",
    )
    max_points: int = Field(
        default=MAX_INDEXED_POINTS,
        ge=3,
        le=MAX_INDEXED_POINTS,
        description="Largest point count accepted by index-emitting algorithms",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch polygon processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class HullmeshSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> HullmeshSettings:
    """Get default application settings."""
    return HullmeshSettings()
