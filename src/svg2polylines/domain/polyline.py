"""Polyline output type."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from svg2polylines.domain.point import Point


@dataclass(frozen=True, slots=True)
class Polyline:
    """An ordered chain of points drawn as one continuous pen-down stroke.

    The flattening engine only emits polylines with at least two points and
    never emits two identical consecutive points.

    Attributes:
        points: Points of the chain, in drawing order
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if not self.points:
            raise ValueError("A polyline needs at least one point")

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    @property
    def start(self) -> Point:
        """First point of the chain."""
        return self.points[0]

    @property
    def end(self) -> Point:
        """Last point of the chain."""
        return self.points[-1]

    def is_closed(self) -> bool:
        """Check whether the chain ends where it starts.

        Returns:
            True if there are at least three points and the first and last
            points coincide
        """
        return len(self.points) > 2 and self.points[0] == self.points[-1]

    def to_tuples(self) -> list[tuple[float, float]]:
        """Convert to a list of (x, y) tuples."""
        return [p.to_tuple() for p in self.points]

    def to_list(self) -> list[dict[str, Any]]:
        """Serialize to a list of coordinate-pair records.

        Returns:
            List of {"x": float, "y": float} dictionaries, in drawing order
        """
        return [p.to_dict() for p in self.points]

    @classmethod
    def from_list(cls, data: Sequence[dict[str, Any]]) -> "Polyline":
        """Deserialize from a list of coordinate-pair records.

        Args:
            data: List of {"x", "y"} dictionaries

        Returns:
            Polyline instance
        """
        return cls(points=tuple(Point.from_dict(p) for p in data))

    @classmethod
    def from_tuples(cls, pairs: Sequence[tuple[float, float]]) -> "Polyline":
        """Build a polyline from (x, y) pairs."""
        return cls(points=tuple(Point(float(x), float(y)) for x, y in pairs))
