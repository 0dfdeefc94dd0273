"""Converters between fontTools pens and path commands.

fontTools pens are a widely used drawing protocol (moveTo, lineTo, curveTo,
qCurveTo, closePath, endPath). These helpers replay a command stream onto
any pen, and turn a RecordingPen recording back into commands, so outlines
from fontTools (glyphs, fontTools.svgLib) can be flattened with the same
engine.
"""

from collections.abc import Iterable
from typing import Any

from fontTools.pens.basePen import (
    AbstractPen,
    decomposeQuadraticSegment,
    decomposeSuperBezierSegment,
)

from svg2polylines.core.arc import arc_to_cubics
from svg2polylines.domain import (
    ArcTo,
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadCurveTo,
)
from svg2polylines.exceptions import MalformedPathDataError


def draw_commands(commands: Iterable[PathCommand], pen: AbstractPen) -> None:
    """Draw path commands onto a fontTools pen.

    Open subpaths are finished with endPath(), closed ones with closePath().
    Arcs are drawn as cubic curves; degenerate arcs as lines.

    Args:
        commands: Absolute path commands
        pen: Any object implementing the fontTools pen protocol

    Raises:
        MalformedPathDataError: If a drawing command precedes the first moveto
    """
    cursor: Point | None = None
    subpath_start: Point | None = None
    open_subpath = False

    for command in commands:
        if isinstance(command, MoveTo):
            if open_subpath:
                pen.endPath()
            pen.moveTo(command.point.to_tuple())
            cursor = subpath_start = command.point
            open_subpath = True
            continue

        if isinstance(command, ClosePath):
            if open_subpath:
                pen.closePath()
                open_subpath = False
            cursor = subpath_start
            continue

        if cursor is None:
            raise MalformedPathDataError(f"{type(command).__name__} before initial moveto")

        if not open_subpath:
            # Drawing resumed after a closepath without a new moveto
            pen.moveTo(cursor.to_tuple())
            open_subpath = True

        if isinstance(command, LineTo):
            pen.lineTo(command.point.to_tuple())
            cursor = command.point

        elif isinstance(command, CurveTo):
            pen.curveTo(
                command.control1.to_tuple(),
                command.control2.to_tuple(),
                command.end.to_tuple(),
            )
            cursor = command.end

        elif isinstance(command, QuadCurveTo):
            pen.qCurveTo(command.control.to_tuple(), command.end.to_tuple())
            cursor = command.end

        elif isinstance(command, ArcTo):
            segments = arc_to_cubics(
                cursor,
                command.rx,
                command.ry,
                command.rotation,
                command.large_arc,
                command.sweep,
                command.end,
            )
            if segments is None:
                if command.end != cursor:
                    pen.lineTo(command.end.to_tuple())
            else:
                for control1, control2, end in segments:
                    pen.curveTo(control1.to_tuple(), control2.to_tuple(), end.to_tuple())
            cursor = command.end

        else:
            raise TypeError(f"Unknown path command: {command!r}")

    if open_subpath:
        pen.endPath()


def _point(pt: Any) -> Point:
    x, y = pt
    return Point(float(x), float(y))


def commands_from_recording(recording: Iterable[tuple[str, tuple[Any, ...]]]) -> list[PathCommand]:
    """Convert a RecordingPen recording to path commands.

    The RecordingPen records drawing calls like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), ..., (x, y)))  # any number of off-curve points
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))
    - ('closePath', ())
    - ('endPath', ())

    Multi-point qCurveTo and curveTo segments are decomposed into single
    quadratic and cubic segments.

    Args:
        recording: The `value` of a fontTools RecordingPen

    Returns:
        Equivalent path commands

    Raises:
        ValueError: For pen calls that have no path command equivalent, such
            as components or TrueType contours without on-curve points
    """
    commands: list[PathCommand] = []

    for method, args in recording:
        if method == "moveTo":
            commands.append(MoveTo(_point(args[0])))

        elif method == "lineTo":
            commands.append(LineTo(_point(args[0])))

        elif method == "curveTo":
            if len(args) == 3:
                segments = [args]
            else:
                segments = decomposeSuperBezierSegment(args)
            for pt1, pt2, pt3 in segments:
                commands.append(CurveTo(_point(pt1), _point(pt2), _point(pt3)))

        elif method == "qCurveTo":
            if args[-1] is None:
                raise ValueError("Contours without on-curve points are not supported")
            if len(args) == 1:
                commands.append(LineTo(_point(args[0])))
                continue
            for control, end in decomposeQuadraticSegment(args):
                commands.append(QuadCurveTo(_point(control), _point(end)))

        elif method == "closePath":
            commands.append(ClosePath())

        elif method == "endPath":
            continue

        else:
            raise ValueError(f"Unsupported pen method: {method!r}")

    return commands
