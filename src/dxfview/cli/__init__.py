"""Command-line interface for dxfview.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Entity and extents summary for a drawing
- PNG export with zoom, pan, grid and measurement overlay
- Nearest-vertex queries against the rendered view
"""

from dxfview.cli.app import cli, main

__all__ = ["cli", "main"]
