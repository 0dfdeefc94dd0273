"""Two-dimensional point value type."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable; two points are equal when their coordinates are.
    Coordinates are in the units of the source document.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))

    def offset(self, dx: float, dy: float) -> "Point":
        """Return this point translated by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def reflect(self, center: "Point") -> "Point":
        """Return the reflection of this point about center."""
        return Point(2.0 * center.x - self.x, 2.0 * center.y - self.y)


ORIGIN = Point(0.0, 0.0)
