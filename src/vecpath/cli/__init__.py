"""Command-line interface for vecpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Renders the demo scene through the SVG rasterizer
- Verbose/quiet output modes
- Per-frame draw statistics
"""

from vecpath.cli.app import cli, main

__all__ = ["cli", "main"]
