"""Command-line interface for boroughmap.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Build region stores from saved Overpass relation responses
- Classify single points or whole JSON point files
- Export borough polygons as GeoJSON
"""

from boroughmap.cli.app import cli, main

__all__ = ["cli", "main"]
