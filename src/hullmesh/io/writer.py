"""Writer for JSON result files."""

import json
from pathlib import Path
from typing import Any

from hullmesh.domain import PolygonTriangulation
from hullmesh.exceptions import OutputFileError


class ResultWriter:
    """Writes algorithm results as JSON.

    Example:
        writer = ResultWriter(Path("out.json"))
        writer.write_hull([0, 0, 1, 0, 1, 1])
    """

    def __init__(self, path: Path) -> None:
        """Initialize the writer.

        Args:
            path: Destination file, overwritten if it exists
        """
        self._path = path

    @staticmethod
    def get_output_path(input_path: Path, suffix: str) -> Path:
        """Generate output path next to the input.

        Args:
            input_path: Path to the input file
            suffix: Name suffix, e.g. "hull"

        Returns:
            Path like ``cloud-hull.json``
        """
        return input_path.parent / f"{input_path.stem}-{suffix}.json"

    def write_hull(self, hull: list[float] | list[int], as_indices: bool = False) -> None:
        """Write a hull as coordinates or indices."""
        key = "indices" if as_indices else "points"
        self._write({"hull": {key: hull}})

    def write_triangles(self, indices: list[int]) -> None:
        """Write a single triangle index buffer."""
        self._write({"triangles": indices})

    def write_triangulations(self, results: list[PolygonTriangulation]) -> None:
        """Write per-polygon triangulations."""
        self._write(
            {
                "polygons": [
                    {
                        "name": result.name,
                        "triangles": result.indices,
                        "degenerate": result.degenerate,
                    }
                    for result in results
                ]
            }
        )

    def _write(self, payload: dict[str, Any]) -> None:
        try:
            self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            raise OutputFileError(str(self._path), str(e)) from e
