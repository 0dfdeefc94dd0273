"""Domain models for svg2polylines.

This module contains the value types flowing through the conversion
pipeline. All models are designed to be:

- Immutable (frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of the XML layer

Key classes:
- Point: A 2D point
- MoveTo, LineTo, CurveTo, QuadCurveTo, ArcTo, ClosePath: Absolute path commands
- Polyline: An ordered chain of points
- PathElement: Raw path data of one document element
"""

from svg2polylines.domain.commands import (
    ArcTo,
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadCurveTo,
)
from svg2polylines.domain.element import PathElement
from svg2polylines.domain.point import ORIGIN, Point
from svg2polylines.domain.polyline import Polyline

__all__: list[str] = [
    # Commands
    "ArcTo",
    "ClosePath",
    "CurveTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QuadCurveTo",
    # Core types
    "ORIGIN",
    "PathElement",
    "Point",
    "Polyline",
]
