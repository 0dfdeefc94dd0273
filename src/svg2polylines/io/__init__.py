"""Document I/O layer for svg2polylines.

This module handles everything outside the conversion core: reading SVG
documents, writing the polyline output, and exchanging outlines with
fontTools pens.

Key responsibilities:
- Load SVG documents and extract raw path data per element
- Serialize polylines to JSON
- Replay and record path commands through the fontTools pen protocol

Key classes:
- SvgReader: Load documents and iterate path elements
- PolylineWriter: Save polylines as JSON
"""

from svg2polylines.io.converter import commands_from_recording, draw_commands
from svg2polylines.io.reader import SvgReader
from svg2polylines.io.writer import (
    PolylineWriter,
    polylines_from_data,
    polylines_to_data,
    polylines_to_json,
)

__all__ = [
    "PolylineWriter",
    "SvgReader",
    "commands_from_recording",
    "draw_commands",
    "polylines_from_data",
    "polylines_to_data",
    "polylines_to_json",
]
