"""Batch records for polygon triangulation.

These types carry polygons and their triangulations between the batch
processor and its worker processes, so they serialize to plain dicts.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Polygon:
    """A named simple polygon.

    Attributes:
        name: Identifier used in logs and output files
        vertices: Flat x/y buffer of the polygon outline, either winding
    """

    name: str
    vertices: tuple[float, ...]

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the outline."""
        return len(self.vertices) // 2

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"name": self.name, "vertices": list(self.vertices)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary."""
        return cls(name=data["name"], vertices=tuple(float(v) for v in data["vertices"]))


@dataclass
class PolygonTriangulation:
    """Ear-clipping output for one polygon.

    Attributes:
        name: Name of the source polygon
        indices: Flat triangle index buffer, stride 3
        fallback_count: How many ears were forced by the no-ear fallback
        duration_ms: Wall time spent triangulating
    """

    name: str
    indices: list[int] = field(default_factory=list)
    fallback_count: int = 0
    duration_ms: float = 0.0

    @property
    def triangle_count(self) -> int:
        """Number of emitted triangles."""
        return len(self.indices) // 3

    @property
    def degenerate(self) -> bool:
        """True if the triangulation relied on the no-ear fallback."""
        return self.fallback_count > 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "name": self.name,
            "indices": list(self.indices),
            "fallback_count": self.fallback_count,
            "duration_ms": self.duration_ms,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PolygonTriangulation":
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            indices=list(data["indices"]),
            fallback_count=data.get("fallback_count", 0),
            duration_ms=data.get("duration_ms", 0.0),
        )
