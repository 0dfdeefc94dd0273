"""Typed path drawing commands.

The command set is closed: a path element is a sequence of these six
variants, all carrying absolute coordinates. Relative coordinates and
shorthand commands (H, V, S, T) are resolved by the parser before a command
is constructed, so consumers never need to track the coordinate mode.
"""

from dataclasses import dataclass
from typing import TypeAlias

from svg2polylines.domain.point import Point


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at point."""

    point: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line from the cursor to point."""

    point: Point


@dataclass(frozen=True, slots=True)
class CurveTo:
    """Cubic Bezier from the cursor through two control points to end."""

    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True, slots=True)
class QuadCurveTo:
    """Quadratic Bezier from the cursor through one control point to end."""

    control: Point
    end: Point


@dataclass(frozen=True, slots=True)
class ArcTo:
    """Elliptical arc from the cursor to end, in SVG endpoint parameterization.

    Attributes:
        rx: X radius (sign is ignored)
        ry: Y radius (sign is ignored)
        rotation: Rotation of the ellipse x-axis in degrees
        large_arc: Take the arc spanning more than 180 degrees
        sweep: Draw in the positive-angle direction
        end: Absolute end point
    """

    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    end: Point


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath back to its start point."""


PathCommand: TypeAlias = MoveTo | LineTo | CurveTo | QuadCurveTo | ArcTo | ClosePath

