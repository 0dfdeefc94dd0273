"""Geometric helpers shared by the flattening engine.

This module provides small pure functions for:
- Interpolation between points
- Point-to-segment distance (the flatness measure)
- Bezier evaluation, used for verification and tests
- Polyline length

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from svg2polylines.domain import Point


def lerp(a: Point, b: Point, t: float) -> Point:
    """Linearly interpolate between two points.

    Args:
        a: Start point (t = 0)
        b: End point (t = 1)
        t: Interpolation parameter

    Returns:
        Interpolated point
    """
    return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def midpoint(a: Point, b: Point) -> Point:
    """Return the midpoint of two points."""
    return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Find the distance from a point to a line segment.

    The foot of the perpendicular is clamped to the segment, so points
    beyond either end measure to the nearest endpoint. A zero-length segment
    degenerates to point-to-point distance.

    Args:
        point: The point to measure from
        seg_start: Start of the segment
        seg_end: End of the segment

    Returns:
        Distance from point to the closest point of the segment

    Examples:
        >>> distance_to_segment(Point(5.0, 3.0), Point(0.0, 0.0), Point(10.0, 0.0))
        3.0
        >>> distance_to_segment(Point(-4.0, 3.0), Point(0.0, 0.0), Point(10.0, 0.0))
        5.0
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y
    length_sq = dx * dx + dy * dy

    if length_sq == 0.0:
        return distance(point, seg_start)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))

    closest_x = seg_start.x + t * dx
    closest_y = seg_start.y + t * dy
    return math.hypot(point.x - closest_x, point.y - closest_y)


def bezier_point(controls: Sequence[Point], t: float) -> Point:
    """Evaluate a Bezier curve of any degree at parameter t.

    Uses De Casteljau's algorithm.

    Args:
        controls: Control points, start and end included
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    points = list(controls)
    while len(points) > 1:
        points = [lerp(a, b, t) for a, b in zip(points, points[1:])]
    return points[0]


def split_bezier(controls: Sequence[Point]) -> tuple[tuple[Point, ...], tuple[Point, ...]]:
    """Split a Bezier curve at t = 0.5.

    Args:
        controls: Control points of the curve (3 for quadratic, 4 for cubic)

    Returns:
        Control points of the left half and of the right half. The halves
        share the on-curve midpoint.
    """
    left = [controls[0]]
    right = [controls[-1]]
    level = list(controls)
    while len(level) > 1:
        level = [midpoint(a, b) for a, b in zip(level, level[1:])]
        left.append(level[0])
        right.append(level[-1])
    right.reverse()
    return tuple(left), tuple(right)


def polyline_length(points: Sequence[Point]) -> float:
    """Total length of a chain of points."""
    return sum(distance(a, b) for a, b in zip(points, points[1:]))
