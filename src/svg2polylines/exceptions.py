"""Exception hierarchy for svg2polylines."""


class Svg2PolylinesError(Exception):
    """Base exception for all svg2polylines errors."""

    pass


class PathDataError(Svg2PolylinesError):
    """Errors related to path data interpretation."""

    pass


class MalformedPathDataError(PathDataError):
    """Path data violates the SVG path grammar.

    Raised by the command stream builder as soon as the offending token is
    reached. The whole path element is abandoned; other elements of the same
    document are unaffected.
    """

    def __init__(
        self,
        reason: str,
        position: int | None = None,
        element_id: str | None = None,
    ) -> None:
        self.reason = reason
        self.position = position
        self.element_id = element_id

        location = []
        if element_id is not None:
            location.append(f"element '{element_id}'")
        if position is not None:
            location.append(f"position {position}")

        if location:
            super().__init__(f"Malformed path data ({', '.join(location)}): {reason}")
        else:
            super().__init__(f"Malformed path data: {reason}")

    def with_element(self, element_id: str) -> "MalformedPathDataError":
        """Return a copy of this error attributed to a path element."""
        return MalformedPathDataError(self.reason, self.position, element_id)


class ElementProcessingError(PathDataError):
    """Unexpected failure while converting a specific path element."""

    def __init__(self, element_id: str, reason: str) -> None:
        self.element_id = element_id
        self.reason = reason
        super().__init__(f"Error processing path element '{element_id}': {reason}")


class DocumentError(Svg2PolylinesError):
    """Errors related to reading documents or writing output."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading an SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class OutputWriteError(DocumentError):
    """Error writing converted polylines."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write output '{path}': {reason}")
