"""Path element representation.

A path element is one drawing-instruction sequence taken from the source
document: the raw `d` attribute of a single element, plus enough identity to
report errors against it.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PathElement:
    """Raw path data of one document element.

    Attributes:
        index: Position of the element among all path elements of the document
        element_id: The element's id attribute, or "<tag>[<index>]" if it has none
        data: Raw path data string
    """

    index: int
    element_id: str
    data: str

    def is_empty(self) -> bool:
        """Check if the element carries no path data."""
        return not self.data.strip()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"index": self.index, "element_id": self.element_id, "data": self.data}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathElement":
        """Deserialize from dictionary."""
        return cls(index=data["index"], element_id=data["element_id"], data=data["data"])
