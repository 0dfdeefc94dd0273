"""Command-line interface for svg2polylines.

This module provides the CLI using Typer with rich output.

Key features:
- Text listing or JSON output of the polylines
- Verbose/quiet output modes
- Optional parallel processing of path elements
- Detailed error reporting
"""

from svg2polylines.cli.app import cli, main

__all__ = ["cli", "main"]
