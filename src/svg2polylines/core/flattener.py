"""Curve flattening engine.

Consumes the command stream of one path element and produces its polylines.
Lines are copied directly; quadratic and cubic Bezier curves are subdivided
adaptively until every piece lies within the tolerance of its chord; arcs are
converted to cubic segments first.

The per-element mutable context (cursor, subpath start, the polyline being
built, finished polylines) lives in a FlattenState that is created for each
call and discarded afterwards, so calls never share state.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from svg2polylines.config import DEFAULT_MAX_DEPTH, DEFAULT_TOLERANCE
from svg2polylines.core._bezier import flatten_cubic, flatten_quadratic
from svg2polylines.core.arc import arc_to_cubics
from svg2polylines.core.parser import parse_path
from svg2polylines.domain import (
    ArcTo,
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    Polyline,
    QuadCurveTo,
)
from svg2polylines.exceptions import MalformedPathDataError

logger = logging.getLogger(__name__)


@dataclass
class FlattenState:
    """Mutable accumulator for flattening one path element.

    Attributes:
        cursor: Current pen position (None until the first moveto)
        subpath_start: Start of the current subpath, target of closepath
        points: Points of the polyline being built
        polylines: Finished polylines, in drawing order
    """

    cursor: Point | None = None
    subpath_start: Point | None = None
    points: list[Point] = field(default_factory=list)
    polylines: list[Polyline] = field(default_factory=list)

    def is_valid(self) -> bool:
        """A polyline is only valid if it has more than one point."""
        return len(self.points) > 1

    def add(self, point: Point) -> None:
        """Append a point, skipping it if it repeats the last one."""
        if not self.points or self.points[-1] != point:
            self.points.append(point)

    def move_to(self, point: Point) -> None:
        """Finish the current polyline and start a new subpath at point."""
        self.flush()
        self.points = [point]
        self.cursor = point
        self.subpath_start = point

    def ensure_started(self, command: PathCommand) -> Point:
        """Return the cursor, seeding a polyline after a closepath.

        Raises:
            MalformedPathDataError: If no moveto has set the cursor yet
        """
        if self.cursor is None:
            raise MalformedPathDataError(
                f"{type(command).__name__} before initial moveto"
            )
        if not self.points:
            self.points.append(self.cursor)
        return self.cursor

    def close(self) -> None:
        """Close the current subpath and finish its polyline."""
        if self.points and self.subpath_start is not None:
            self.add(self.subpath_start)
        self.flush()
        self.cursor = self.subpath_start

    def flush(self) -> None:
        """Move the polyline being built to the output, dropping single points."""
        if self.is_valid():
            self.polylines.append(Polyline(points=tuple(self.points)))
        self.points = []


def _validate(tolerance: float, max_depth: int) -> None:
    if not tolerance > 0.0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")


def apply_command(
    state: FlattenState,
    command: PathCommand,
    tolerance: float,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> None:
    """Apply one path command to the flattening state.

    Args:
        state: Accumulator for the current path element
        command: Command with absolute coordinates
        tolerance: Maximum deviation between curve and polyline
        max_depth: Subdivision depth cap per curve

    Raises:
        MalformedPathDataError: If a drawing command precedes the first moveto
    """
    if isinstance(command, MoveTo):
        state.move_to(command.point)

    elif isinstance(command, LineTo):
        state.ensure_started(command)
        state.add(command.point)
        state.cursor = command.point

    elif isinstance(command, CurveTo):
        start = state.ensure_started(command)
        points = flatten_cubic(
            [start, command.control1, command.control2, command.end],
            tolerance,
            max_depth,
        )
        for point in points:
            state.add(point)
        state.cursor = command.end

    elif isinstance(command, QuadCurveTo):
        start = state.ensure_started(command)
        points = flatten_quadratic([start, command.control, command.end], tolerance, max_depth)
        for point in points:
            state.add(point)
        state.cursor = command.end

    elif isinstance(command, ArcTo):
        start = state.ensure_started(command)
        segments = arc_to_cubics(
            start,
            command.rx,
            command.ry,
            command.rotation,
            command.large_arc,
            command.sweep,
            command.end,
        )
        if segments is None:
            # Degenerate arc: straight line, elided if zero-length
            state.add(command.end)
        else:
            segment_start = start
            for control1, control2, end in segments:
                points = flatten_cubic(
                    [segment_start, control1, control2, end], tolerance, max_depth
                )
                for point in points:
                    state.add(point)
                segment_start = end
        state.cursor = command.end

    elif isinstance(command, ClosePath):
        state.close()

    else:
        raise TypeError(f"Unknown path command: {command!r}")


def flatten_commands(
    commands: Iterable[PathCommand],
    tolerance: float = DEFAULT_TOLERANCE,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Polyline]:
    """Flatten the commands of one path element into polylines.

    Each moveto starts a new polyline and each closepath finishes one.
    Polylines that collapse to a single point are dropped. If the command
    stream raises, nothing is returned for the element.

    Args:
        commands: Absolute path commands, starting with a moveto
        tolerance: Maximum perpendicular deviation from the true curve
        max_depth: Subdivision depth cap per curve

    Returns:
        Polylines in drawing order

    Raises:
        ValueError: If tolerance is not positive or max_depth < 1
        MalformedPathDataError: If the command stream is malformed

    Examples:
        >>> lines = flatten_commands([MoveTo(Point(0, 0)), LineTo(Point(10, 0))])
        >>> lines[0].to_tuples()
        [(0, 0), (10, 0)]
    """
    _validate(tolerance, max_depth)

    state = FlattenState()
    for command in commands:
        apply_command(state, command, tolerance, max_depth)
    state.flush()

    return state.polylines


def flatten_path(
    data: str,
    tolerance: float = DEFAULT_TOLERANCE,
    max_depth: int = DEFAULT_MAX_DEPTH,
    element_id: str | None = None,
) -> list[Polyline]:
    """Parse and flatten the path data of one element.

    Args:
        data: Raw path data string
        tolerance: Maximum perpendicular deviation from the true curve
        max_depth: Subdivision depth cap per curve
        element_id: Identifier of the element, used in error messages

    Returns:
        Polylines in drawing order

    Raises:
        ValueError: If tolerance is not positive or max_depth < 1
        MalformedPathDataError: If the path data is malformed
    """
    logger.debug("New path %s (%d characters)", element_id, len(data))

    try:
        polylines = flatten_commands(parse_path(data, element_id), tolerance, max_depth)
    except MalformedPathDataError as e:
        if e.element_id is None and element_id is not None:
            raise e.with_element(element_id) from e
        raise

    logger.debug(
        "Path %s flattened: %d polylines, %d points",
        element_id, len(polylines), sum(len(p) for p in polylines)
    )
    return polylines
