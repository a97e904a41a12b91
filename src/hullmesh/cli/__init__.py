"""Command-line interface for hullmesh.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Convex hulls as coordinates or indices
- Delaunay triangulation of point clouds
- Parallel ear clipping of polygon batches with a progress bar
- Quiet mode and structured log files
"""

from hullmesh.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
