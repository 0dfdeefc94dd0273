"""JSON writer for converted polylines.

The serialized form is a list of polylines, each a list of coordinate-pair
records:

    [[{"x": 0.0, "y": 0.0}, {"x": 10.0, "y": 0.0}], ...]

Polyline order and point order are significant and must be preserved by
consumers.
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from svg2polylines.domain import Polyline
from svg2polylines.exceptions import OutputWriteError


def polylines_to_data(polylines: Sequence[Polyline]) -> list[list[dict[str, Any]]]:
    """Convert polylines to plain JSON-compatible data."""
    return [polyline.to_list() for polyline in polylines]


def polylines_from_data(data: Sequence[Sequence[dict[str, Any]]]) -> list[Polyline]:
    """Rebuild polylines from the structure produced by polylines_to_data."""
    return [Polyline.from_list(points) for points in data]


def polylines_to_json(polylines: Sequence[Polyline], indent: int | None = None) -> str:
    """Serialize polylines to a JSON string."""
    return json.dumps(polylines_to_data(polylines), indent=indent)


class PolylineWriter:
    """Writes converted polylines as JSON.

    Example:
        writer = PolylineWriter(Path("drawing.json"))
        writer.write(polylines)
    """

    def __init__(self, output_path: Path, indent: int | None = 2) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the JSON file will be written
            indent: JSON indentation (None for compact output)
        """
        self._output_path = output_path
        self._indent = indent

    @property
    def output_path(self) -> Path:
        """Path the writer targets."""
        return self._output_path

    def write(self, polylines: Sequence[Polyline]) -> None:
        """Write polylines to the output path.

        Args:
            polylines: Polylines to serialize

        Raises:
            OutputWriteError: If the file cannot be written
        """
        try:
            self._output_path.write_text(
                polylines_to_json(polylines, indent=self._indent) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise OutputWriteError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for an input document.

        Converts: drawing.svg -> drawing.json

        Args:
            input_path: Original SVG file path

        Returns:
            Path with a .json extension next to the input
        """
        return input_path.with_suffix(".json")
