"""Command-line interface for ttf2dxf.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Font mode (one layer per glyph with metrics) and text mode
- Tunable arc subdivision and extents sampling
- Optional scanline raster tracing
- Progress bar and summary on stderr, drawing to file or stdout
"""

from ttf2dxf.cli.app import cli, main

__all__ = ["cli", "main"]
