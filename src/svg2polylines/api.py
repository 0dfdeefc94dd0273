"""Convenience functions for library use."""

from svg2polylines.config import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_TOLERANCE,
    FlattenConfig,
    ProcessingConfig,
    Svg2PolylinesSettings,
)
from svg2polylines.core.flattener import flatten_path
from svg2polylines.core.processor import DocumentProcessor
from svg2polylines.domain import Polyline


def parse(svg: str, tolerance: float = DEFAULT_TOLERANCE) -> list[Polyline]:
    """Parse an SVG document into polylines.

    Every element with a `d` attribute is converted, in document order. Any
    malformed path data aborts the conversion.

    Args:
        svg: SVG document text
        tolerance: Maximum deviation between curves and their polylines

    Returns:
        Polylines of all path elements

    Raises:
        DocumentLoadError: If the document is not well-formed XML
        MalformedPathDataError: If an element carries malformed path data
        ElementProcessingError: If converting an element fails otherwise
    """
    settings = Svg2PolylinesSettings(
        flatten=FlattenConfig(tolerance=tolerance),
        processing=ProcessingConfig(skip_malformed=False),
    )
    return DocumentProcessor(settings).process_string(svg).polylines


def flatten_path_data(
    data: str,
    tolerance: float = DEFAULT_TOLERANCE,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Polyline]:
    """Convert the path data of a single element into polylines.

    Args:
        data: Path data string, e.g. "M0,0 C0,10 10,10 10,0"
        tolerance: Maximum deviation between curves and their polylines
        max_depth: Subdivision depth cap per curve

    Returns:
        Polylines in drawing order

    Raises:
        MalformedPathDataError: If the path data is malformed
    """
    return flatten_path(data, tolerance=tolerance, max_depth=max_depth)
