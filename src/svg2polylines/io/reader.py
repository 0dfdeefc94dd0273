"""SVG reader for extracting path data.

This module provides the SvgReader class for loading SVG documents and
extracting the raw path data of every element that carries a `d`
attribute. Styles, transforms and units are not interpreted.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

from svg2polylines.domain import PathElement
from svg2polylines.exceptions import DocumentLoadError


def _local_name(tag: str) -> str:
    """Strip the namespace from an element tag ("{ns}path" -> "path")."""
    if "}" in tag:
        return tag.rsplit("}", 1)[1]
    return tag


class SvgReader:
    """Loads SVG documents and extracts path elements.

    Example:
        reader = SvgReader(Path("drawing.svg"))
        reader.load()
        for element in reader.iter_path_elements():
            print(element.element_id, element.data)
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the SVG reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._root: ET.Element | None = None

    @classmethod
    def from_string(cls, svg: str, name: str = "<string>") -> "SvgReader":
        """Create a loaded reader from SVG text.

        Args:
            svg: SVG document text
            name: Name used in error messages

        Returns:
            SvgReader with the document already loaded

        Raises:
            DocumentLoadError: If the text is not well-formed XML
        """
        reader = cls(Path(name))
        try:
            reader._root = ET.fromstring(svg.strip())
        except ET.ParseError as e:
            raise DocumentLoadError(name, str(e)) from e
        return reader

    def load(self) -> None:
        """Load the SVG file.

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentLoadError: If the file is not well-formed XML
        """
        if not self._svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {self._svg_path}")

        try:
            self._root = ET.parse(self._svg_path).getroot()
        except ET.ParseError as e:
            raise DocumentLoadError(str(self._svg_path), str(e)) from e

    @property
    def path_count(self) -> int:
        """Return the number of elements carrying path data.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        return sum(1 for _ in self.iter_path_elements())

    def iter_path_elements(self) -> Iterator[PathElement]:
        """Iterate over elements with a `d` attribute, in document order.

        Yields:
            PathElement for each element; the id is the element's `id`
            attribute or "<tag>[<index>]" when it has none

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._root is None:
            raise RuntimeError("Document not loaded. Call load() first.")

        index = 0
        for node in self._root.iter():
            data = node.get("d")
            if data is None:
                continue
            element_id = node.get("id") or f"{_local_name(node.tag)}[{index}]"
            yield PathElement(index=index, element_id=element_id, data=data)
            index += 1

    def close(self) -> None:
        """Release the parsed document."""
        self._root = None

    def __enter__(self) -> "SvgReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
