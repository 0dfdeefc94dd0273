"""Path command stream builder.

Turns an SVG path-data string (the `d` attribute) into a lazy stream of
absolute path commands. The parser owns all cursor bookkeeping needed to
resolve the path mini-language:

- relative (lowercase) coordinates are made absolute against the cursor
- implicit command repetition (extra argument groups without a new letter)
- H/V become LineTo, S/T become CurveTo/QuadCurveTo with reflected controls
- Z returns the cursor to the start of the current subpath

Arcs are passed through with their raw parameters; converting them to curves
is pure geometry and happens in the flattening engine.
"""

import re
from collections.abc import Iterator

from svg2polylines.domain import (
    ORIGIN,
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

# Number of arguments per argument group, by lowercase command letter
ARGUMENT_COUNTS: dict[str, int] = {
    "m": 2,
    "l": 2,
    "h": 1,
    "v": 1,
    "c": 6,
    "s": 4,
    "q": 4,
    "t": 2,
    "a": 7,
    "z": 0,
}

COMMAND_LETTERS = frozenset(ARGUMENT_COUNTS) | frozenset(k.upper() for k in ARGUMENT_COUNTS)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE = " \t\r\n\f"

# Arc arguments 3 and 4 are single-character flags
_ARC_FLAG_INDICES = (3, 4)


class _PathScanner:
    """Character-level reader over path data."""

    def __init__(self, data: str, element_id: str | None) -> None:
        self.data = data
        self.pos = 0
        self.element_id = element_id

    def error(self, reason: str) -> MalformedPathDataError:
        return MalformedPathDataError(reason, position=self.pos, element_id=self.element_id)

    def skip_whitespace(self) -> None:
        while self.pos < len(self.data) and self.data[self.pos] in _WHITESPACE:
            self.pos += 1

    def skip_separator(self) -> bool:
        """Skip whitespace with at most one comma; report whether a comma was seen."""
        self.skip_whitespace()
        if self.pos < len(self.data) and self.data[self.pos] == ",":
            self.pos += 1
            self.skip_whitespace()
            return True
        return False

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def peek(self) -> str:
        return self.data[self.pos]

    def at_number(self) -> bool:
        return _NUMBER_RE.match(self.data, self.pos) is not None

    def read_command(self) -> str:
        letter = self.data[self.pos]
        if letter not in COMMAND_LETTERS:
            raise self.error(f"unexpected character {letter!r}")
        self.pos += 1
        return letter

    def read_number(self, command: str, first: bool = False) -> float:
        if first:
            self.skip_whitespace()
        else:
            self.skip_separator()
        if self.at_end():
            raise self.error(f"missing argument for command {command!r}")
        match = _NUMBER_RE.match(self.data, self.pos)
        if match is None:
            raise self.error(
                f"expected number for command {command!r}, found {self.peek()!r}"
            )
        self.pos = match.end()
        return float(match.group())

    def read_flag(self, command: str) -> bool:
        self.skip_separator()
        if self.at_end():
            raise self.error(f"missing arc flag for command {command!r}")
        char = self.peek()
        if char not in "01":
            raise self.error(f"arc flag must be 0 or 1, found {char!r}")
        self.pos += 1
        return char == "1"

    def read_arguments(self, command: str) -> list[float]:
        count = ARGUMENT_COUNTS[command.lower()]
        if command in "Aa":
            args: list[float] = []
            for i in range(count):
                if i in _ARC_FLAG_INDICES:
                    args.append(1.0 if self.read_flag(command) else 0.0)
                else:
                    args.append(self.read_number(command, first=i == 0))
            return args
        return [self.read_number(command, first=i == 0) for i in range(count)]


def tokenize(data: str, element_id: str | None = None) -> Iterator[tuple[str, list[float]]]:
    """Split path data into (command letter, argument group) pairs.

    Implicit repetitions are expanded, so every yielded pair carries exactly
    one argument group. Repeated groups after a moveto are reported as
    lineto with the same case.

    Args:
        data: Raw path data
        element_id: Identifier used in error messages

    Yields:
        Tuples of (command letter, arguments)

    Raises:
        MalformedPathDataError: On any grammar violation
    """
    scanner = _PathScanner(data, element_id)
    command: str | None = None

    while True:
        # A comma may only separate two argument groups of the same command
        if command is None or command in "Zz":
            scanner.skip_whitespace()
        elif scanner.skip_separator() and (scanner.at_end() or not scanner.at_number()):
            raise scanner.error(f"expected argument group after ',' for command {command!r}")
        if scanner.at_end():
            return

        if scanner.at_number():
            if command is None:
                raise scanner.error("path data must begin with a moveto command")
            if command in "Zz":
                raise scanner.error("unexpected number after closepath")
            # Implicit repetition
            if command == "M":
                command = "L"
            elif command == "m":
                command = "l"
        else:
            letter = scanner.read_command()
            if command is None and letter not in "Mm":
                raise MalformedPathDataError(
                    "path data must begin with a moveto command",
                    position=scanner.pos - 1,
                    element_id=element_id,
                )
            command = letter
            if command in "Zz":
                yield command, []
                continue

        yield command, scanner.read_arguments(command)


def parse_path(
    data: str,
    element_id: str | None = None,
    origin: Point = ORIGIN,
) -> Iterator[PathCommand]:
    """Parse path data into a lazy stream of absolute path commands.

    Errors surface while iterating, at the offending token. Commands before
    the error have already been yielded; callers that need all-or-nothing
    behavior (the flattening engine does) must discard them.

    Args:
        data: Raw path data string (SVG `d` attribute)
        element_id: Identifier of the path element, used in error messages
        origin: Initial cursor position for a leading relative moveto

    Yields:
        Path commands with absolute coordinates

    Raises:
        MalformedPathDataError: If the data violates the path grammar

    Examples:
        >>> list(parse_path("M1,2 h3"))
        [MoveTo(point=Point(x=1.0, y=2.0)), LineTo(point=Point(x=4.0, y=2.0))]
    """
    cursor = origin
    subpath_start = origin
    # Last control points, kept only while the previous command can be smoothed
    last_cubic_control: Point | None = None
    last_quad_control: Point | None = None

    for command, args in tokenize(data, element_id):
        relative = command.islower()
        kind = command.lower()
        dx, dy = (cursor.x, cursor.y) if relative else (0.0, 0.0)

        cubic_control: Point | None = None
        quad_control: Point | None = None

        if kind == "m":
            cursor = Point(args[0] + dx, args[1] + dy)
            subpath_start = cursor
            yield MoveTo(cursor)

        elif kind == "l":
            cursor = Point(args[0] + dx, args[1] + dy)
            yield LineTo(cursor)

        elif kind == "h":
            cursor = Point(args[0] + dx, cursor.y)
            yield LineTo(cursor)

        elif kind == "v":
            cursor = Point(cursor.x, args[0] + dy)
            yield LineTo(cursor)

        elif kind == "c":
            control1 = Point(args[0] + dx, args[1] + dy)
            cubic_control = Point(args[2] + dx, args[3] + dy)
            cursor = Point(args[4] + dx, args[5] + dy)
            yield CurveTo(control1, cubic_control, cursor)

        elif kind == "s":
            if last_cubic_control is not None:
                control1 = last_cubic_control.reflect(cursor)
            else:
                control1 = cursor
            cubic_control = Point(args[0] + dx, args[1] + dy)
            cursor = Point(args[2] + dx, args[3] + dy)
            yield CurveTo(control1, cubic_control, cursor)

        elif kind == "q":
            quad_control = Point(args[0] + dx, args[1] + dy)
            cursor = Point(args[2] + dx, args[3] + dy)
            yield QuadCurveTo(quad_control, cursor)

        elif kind == "t":
            if last_quad_control is not None:
                quad_control = last_quad_control.reflect(cursor)
            else:
                quad_control = cursor
            cursor = Point(args[0] + dx, args[1] + dy)
            yield QuadCurveTo(quad_control, cursor)

        elif kind == "a":
            cursor = Point(args[5] + dx, args[6] + dy)
            yield ArcTo(
                rx=args[0],
                ry=args[1],
                rotation=args[2],
                large_arc=args[3] != 0.0,
                sweep=args[4] != 0.0,
                end=cursor,
            )

        else:  # z
            cursor = subpath_start
            yield ClosePath()

        last_cubic_control = cubic_control
        last_quad_control = quad_control
