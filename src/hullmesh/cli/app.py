"""CLI application entry point for hullmesh.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from hullmesh import __version__
from hullmesh.cli.output import (
    console,
    create_progress,
    print_batch_summary,
    print_cancellation_summary,
    print_error,
    print_header,
    print_input_info,
    print_result,
    print_step,
)
from hullmesh.config import (
    GeometryConfig,
    HullmeshSettings,
    LoggingConfig,
    ProcessingConfig,
)
from hullmesh.core import ConvexHull, DelaunayTriangulator, PolygonBatchProcessor
from hullmesh.exceptions import HullmeshError, InputFileError
from hullmesh.io import GeometryReader, ResultWriter

# Create the Typer app
app = typer.Typer(
    name="hullmesh",
    help="Compute convex hulls and triangle meshes from 2D point files.",
    add_completion=False,
    no_args_is_help=True,
)

InputArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to input JSON file",
        show_default=False,
    ),
]
OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output path (default: {name}-{command}.json)",
    ),
]
SortedOption = Annotated[
    bool,
    typer.Option(
        "--sorted",
        help="Points are already sorted by x (then y); skip sorting",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Hullmesh[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compute convex hulls and triangle meshes from 2D point files."""


def _load(input_path: Path, quiet: bool) -> GeometryReader:
    """Validate the input path and load it.

    Raises:
        typer.Exit: If the path is missing or not a file
    """
    if not input_path.exists():
        print_error(
            f"Input file not found: {input_path}",
            details=f"The file '{input_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_path.is_file():
        print_error(
            f"Input path is not a file: {input_path}",
            details="Please provide a path to a JSON point or polygon file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Loading input")

    reader = GeometryReader(input_path)
    try:
        reader.load()
    except OSError as e:
        raise InputFileError(str(input_path), str(e)) from e

    if not quiet:
        print_input_info(
            path=str(input_path),
            point_count=len(reader.point_set()),
            polygon_count=len(reader.polygons()),
        )

    return reader


@app.command()
def hull(
    input_file: InputArgument,
    output: OutputOption = None,
    indices: Annotated[
        bool,
        typer.Option(
            "--indices",
            "-i",
            help="Emit indices into the input instead of coordinates",
        ),
    ] = False,
    is_sorted: SortedOption = False,
    quiet: QuietOption = False,
) -> None:
    """Compute the convex hull of the file's point cloud.

    The hull is written in counter-clockwise order.

    Example:
        hullmesh hull cloud.json --indices
    """
    try:
        reader = _load(input_file, quiet)
        points = reader.point_set().coords

        if not quiet:
            print_step("Computing convex hull")

        start = time.time()
        builder = ConvexHull()
        if indices:
            result: list[float] | list[int] = builder.compute_indices(points, is_sorted)
            vertex_count = len(result)
        else:
            result = builder.compute_polygon(points, is_sorted)
            vertex_count = len(result) // 2
        elapsed = time.time() - start

        output_path = output or ResultWriter.get_output_path(input_file, "hull")
        ResultWriter(output_path).write_hull(result, as_indices=indices)

        if not quiet:
            print_result(str(output_path), f"{vertex_count} hull vertices", elapsed)

    except HullmeshError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def delaunay(
    input_file: InputArgument,
    output: OutputOption = None,
    is_sorted: SortedOption = False,
    epsilon: Annotated[
        float,
        typer.Option(
            "--epsilon",
            help="Absolute circumcircle tolerance; scale it with very small or large coordinates",
            min=1e-15,
            max=1.0,
        ),
    ] = 1e-6,
    quiet: QuietOption = False,
) -> None:
    """Delaunay-triangulate the file's point cloud.

    Example:
        hullmesh delaunay cloud.json -o mesh.json --epsilon 1e-12
    """
    try:
        reader = _load(input_file, quiet)
        points = reader.point_set().coords

        if not quiet:
            print_step("Triangulating")

        start = time.time()
        triangulator = DelaunayTriangulator(GeometryConfig(epsilon=epsilon))
        triangles = triangulator.compute_triangles(points, is_sorted)
        elapsed = time.time() - start

        output_path = output or ResultWriter.get_output_path(input_file, "delaunay")
        ResultWriter(output_path).write_triangles(triangles)

        if not quiet:
            print_result(str(output_path), f"{len(triangles) // 3} triangles", elapsed)

    except HullmeshError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def earclip(
    input_file: InputArgument,
    output: OutputOption = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Ear-clip every polygon in the file, in parallel.

    Example:
        hullmesh earclip outlines.json -j 4
    """
    settings = HullmeshSettings(
        geometry=GeometryConfig(),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        reader = _load(input_file, quiet)
        polygons = reader.polygons()

        if not polygons:
            if not quiet:
                console.print("\nNo polygons found. Nothing to process.")
            raise typer.Exit(code=0)

        output_path = output or ResultWriter.get_output_path(input_file, "earclip")
        processor = PolygonBatchProcessor(settings)

        try:
            if not quiet:
                print_step("Triangulating polygons")
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Triangulating {len(polygons)} polygons",
                        total=len(polygons),
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    results, stats = processor.process(
                        polygons,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                results, stats = processor.process(polygons, max_workers=workers)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_summary(
                    processed=processor.stats.processed_count,
                    cancelled=processor.stats.cancelled_count,
                )
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        ordered = [results[polygon.name] for polygon in polygons if polygon.name in results]
        ResultWriter(output_path).write_triangulations(ordered)

        if not quiet:
            print_batch_summary(
                output_path=str(output_path),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                triangles=stats.triangles_emitted,
                degenerate=stats.degenerate_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_polygon_time_ms,
                min_time_ms=stats.min_polygon_time_ms,
                max_time_ms=stats.max_polygon_time_ms,
            )

        if stats.error_count:
            raise typer.Exit(code=1)

    except HullmeshError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
