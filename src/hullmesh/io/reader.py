"""Reader for JSON point and polygon files.

Two layouts are accepted:

    {"points": [x0, y0, x1, y1, ...]}
    {"polygons": [{"name": "a", "vertices": [x0, y0, ...]}, ...]}

Polygon names are optional and default to ``polygon_<n>``.
"""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from hullmesh.domain import PointSet, Polygon
from hullmesh.exceptions import InputFileError


class PolygonEntry(BaseModel):
    """One polygon as stored in an input file."""

    name: str | None = None
    vertices: list[float]

    @field_validator("vertices")
    @classmethod
    def _even_length(cls, value: list[float]) -> list[float]:
        if len(value) % 2 != 0:
            raise ValueError("vertex buffer length must be even")
        return value


class GeometryFile(BaseModel):
    """Contents of an input file."""

    points: list[float] = Field(default_factory=list)
    polygons: list[PolygonEntry] = Field(default_factory=list)

    @field_validator("points")
    @classmethod
    def _even_length(cls, value: list[float]) -> list[float]:
        if len(value) % 2 != 0:
            raise ValueError("point buffer length must be even")
        return value


class GeometryReader:
    """Loads point sets and polygons from a JSON file.

    Example:
        reader = GeometryReader(Path("cloud.json"))
        reader.load()
        points = reader.point_set()
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the JSON input file
        """
        self._path = path
        self._data: GeometryFile | None = None

    def load(self) -> None:
        """Read and validate the file.

        Raises:
            FileNotFoundError: If the file does not exist
            InputFileError: If the file is not UTF-8 JSON of the expected shape
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Input file not found: {self._path}")

        try:
            self._data = GeometryFile.model_validate_json(self._path.read_bytes())
        except ValidationError as e:
            raise InputFileError(str(self._path), str(e)) from e

    def _require_data(self) -> GeometryFile:
        if self._data is None:
            raise RuntimeError("Input not loaded. Call load() first.")
        return self._data

    def point_set(self) -> PointSet:
        """Return the file's point cloud.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        return PointSet.from_flat(self._require_data().points)

    def polygons(self) -> list[Polygon]:
        """Return the file's polygons with names filled in.

        Raises:
            RuntimeError: If the file has not been loaded yet
            InputFileError: If two polygons share a name
        """
        polygons: list[Polygon] = []
        seen: set[str] = set()
        for i, entry in enumerate(self._require_data().polygons):
            name = entry.name if entry.name is not None else f"polygon_{i}"
            if name in seen:
                raise InputFileError(str(self._path), f"duplicate polygon name '{name}'")
            seen.add(name)
            polygons.append(Polygon(name=name, vertices=tuple(entry.vertices)))
        return polygons
