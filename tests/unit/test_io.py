"""Unit tests for the document I/O layer.

Tests for SvgReader, PolylineWriter, and the fontTools pen converters.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from fontTools.pens.recordingPen import RecordingPen

from svg2polylines.core.parser import parse_path
from svg2polylines.domain import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    PathElement,
    Point,
    Polyline,
    QuadCurveTo,
)
from svg2polylines.exceptions import DocumentLoadError, MalformedPathDataError, OutputWriteError
from svg2polylines.io.converter import commands_from_recording, draw_commands
from svg2polylines.io.reader import SvgReader
from svg2polylines.io.writer import (
    PolylineWriter,
    polylines_from_data,
    polylines_to_data,
    polylines_to_json,
)

NESTED_SVG = """
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <path id="outline" d="M0,0 L1,1"/>
  <g transform="translate(5 5)">
    <path d="M 2 2 L 3 3"/>
    <rect x="0" y="0" width="10" height="10"/>
  </g>
  <path id="blank" d=""/>
</svg>
"""


class TestSvgReader:
    """Tests for SvgReader class."""

    def test_init(self):
        """Test SvgReader initialization."""
        path = Path("drawing.svg")
        reader = SvgReader(path)
        assert reader._svg_path == path
        assert reader._root is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = SvgReader(Path("nonexistent.svg"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_iter_before_load(self):
        """Test iterating elements before loading raises RuntimeError."""
        reader = SvgReader(Path("drawing.svg"))
        with pytest.raises(RuntimeError, match="Document not loaded"):
            list(reader.iter_path_elements())

    def test_elements_in_document_order(self):
        """Test every element with path data is found, nested ones included."""
        reader = SvgReader.from_string(NESTED_SVG)
        elements = list(reader.iter_path_elements())

        assert elements == [
            PathElement(index=0, element_id="outline", data="M0,0 L1,1"),
            PathElement(index=1, element_id="path[1]", data="M 2 2 L 3 3"),
            PathElement(index=2, element_id="blank", data=""),
        ]

    def test_path_count(self):
        """Test counting elements with path data."""
        assert SvgReader.from_string(NESTED_SVG).path_count == 3

    def test_document_without_namespace(self):
        """Test documents without the SVG namespace are read too."""
        reader = SvgReader.from_string('<svg><path d="M 1 1 L 2 2"/></svg>')
        (element,) = reader.iter_path_elements()
        assert element.element_id == "path[0]"

    def test_from_string_malformed(self):
        """Test malformed XML raises DocumentLoadError."""
        with pytest.raises(DocumentLoadError):
            SvgReader.from_string("<svg><path d='M0,0'></svg>", name="broken.svg")

    def test_load_file(self, tmp_path: Path):
        """Test loading a document from disk."""
        svg_path = tmp_path / "drawing.svg"
        svg_path.write_text(NESTED_SVG, encoding="utf-8")

        reader = SvgReader(svg_path)
        reader.load()
        assert reader.path_count == 3

    def test_load_malformed_file(self, tmp_path: Path):
        """Test a malformed file raises DocumentLoadError with its path."""
        svg_path = tmp_path / "broken.svg"
        svg_path.write_text("<svg>", encoding="utf-8")

        with pytest.raises(DocumentLoadError) as exc_info:
            SvgReader(svg_path).load()
        assert exc_info.value.path == str(svg_path)

    def test_context_manager(self, tmp_path: Path):
        """Test the reader loads on entry and releases on exit."""
        svg_path = tmp_path / "drawing.svg"
        svg_path.write_text(NESTED_SVG, encoding="utf-8")

        with SvgReader(svg_path) as reader:
            assert reader.path_count == 3
        assert reader._root is None


class TestPolylineWriter:
    """Tests for PolylineWriter and JSON helpers."""

    @pytest.fixture
    def polylines(self) -> list[Polyline]:
        """Create two simple polylines."""
        return [
            Polyline.from_tuples([(0, 0), (1, 1)]),
            Polyline.from_tuples([(2.5, -1), (3, 4), (2.5, -1)]),
        ]

    def test_to_data(self, polylines: list[Polyline]):
        """Test conversion to coordinate-pair records."""
        data = polylines_to_data(polylines)
        assert data[0] == [{"x": 0.0, "y": 0.0}, {"x": 1.0, "y": 1.0}]
        assert len(data[1]) == 3

    def test_to_json_compact(self, polylines: list[Polyline]):
        """Test the compact JSON form."""
        assert polylines_to_json(polylines[:1]) == '[[{"x": 0.0, "y": 0.0}, {"x": 1.0, "y": 1.0}]]'

    def test_from_data(self, polylines: list[Polyline]):
        """Test rebuilding polylines from parsed JSON."""
        assert polylines_from_data(json.loads(polylines_to_json(polylines))) == polylines

    def test_empty_output(self):
        """Test no polylines serialize to an empty list."""
        assert polylines_to_json([]) == "[]"

    def test_write(self, tmp_path: Path, polylines: list[Polyline]):
        """Test writing polylines to disk."""
        output_path = tmp_path / "drawing.json"
        writer = PolylineWriter(output_path)
        writer.write(polylines)

        assert writer.output_path == output_path
        assert json.loads(output_path.read_text(encoding="utf-8")) == polylines_to_data(polylines)

    def test_write_into_missing_directory(self, tmp_path: Path, polylines: list[Polyline]):
        """Test an unwritable target raises OutputWriteError."""
        writer = PolylineWriter(tmp_path / "missing" / "drawing.json")
        with pytest.raises(OutputWriteError):
            writer.write(polylines)

    @patch.object(Path, "write_text", side_effect=OSError("disk full"))
    def test_write_os_error(self, _mock_write, polylines: list[Polyline]):  # noqa: ARG002
        """Test OS errors are reported with their reason."""
        with pytest.raises(OutputWriteError, match="disk full"):
            PolylineWriter(Path("drawing.json")).write(polylines)

    def test_get_output_path(self):
        """Test the default output path."""
        assert PolylineWriter.get_output_path(Path("art/drawing.svg")) == Path("art/drawing.json")


class TestDrawCommands:
    """Tests for replaying commands onto fontTools pens."""

    def test_closed_path(self):
        """Test a closed subpath ends with closePath."""
        pen = RecordingPen()
        draw_commands(parse_path("M0,0 L10,0 L10,10 Z"), pen)

        assert pen.value == [
            ("moveTo", ((0.0, 0.0),)),
            ("lineTo", ((10.0, 0.0),)),
            ("lineTo", ((10.0, 10.0),)),
            ("closePath", ()),
        ]

    def test_open_subpaths(self):
        """Test open subpaths end with endPath."""
        pen = RecordingPen()
        draw_commands(parse_path("M0,0 L1,0 M5,5 L6,6"), pen)

        methods = [method for method, _ in pen.value]
        assert methods == ["moveTo", "lineTo", "endPath", "moveTo", "lineTo", "endPath"]

    def test_curves(self):
        """Test quadratic and cubic curves map to qCurveTo and curveTo."""
        pen = RecordingPen()
        draw_commands(parse_path("M0,0 Q5,10 10,0 C10,10 20,10 20,0"), pen)

        assert pen.value[1] == ("qCurveTo", ((5.0, 10.0), (10.0, 0.0)))
        assert pen.value[2] == ("curveTo", ((10.0, 10.0), (20.0, 10.0), (20.0, 0.0)))

    def test_arc_drawn_as_cubics(self):
        """Test arcs are drawn as cubic curves."""
        pen = RecordingPen()
        draw_commands(parse_path("M0,0 A5,5 0 0 1 10,0"), pen)

        curves = [args for method, args in pen.value if method == "curveTo"]
        assert len(curves) == 2
        assert curves[-1][-1] == (10.0, 0.0)

    def test_degenerate_arc_drawn_as_line(self):
        """Test a zero-radius arc is drawn as a line."""
        pen = RecordingPen()
        draw_commands(parse_path("M0,0 A0,0 0 0 1 10,0"), pen)
        assert pen.value[1] == ("lineTo", ((10.0, 0.0),))

    def test_drawing_after_closepath(self):
        """Test drawing after Z starts a new contour at the subpath start."""
        pen = RecordingPen()
        draw_commands(parse_path("M1,1 L5,1 Z L1,5"), pen)
        assert pen.value[3:] == [
            ("moveTo", ((1.0, 1.0),)),
            ("lineTo", ((1.0, 5.0),)),
            ("endPath", ()),
        ]

    def test_requires_moveto(self):
        """Test drawing before a moveto is rejected."""
        with pytest.raises(MalformedPathDataError):
            draw_commands([LineTo(Point(1.0, 1.0))], RecordingPen())


class TestCommandsFromRecording:
    """Tests for turning pen recordings into commands."""

    def test_basic_recording(self):
        """Test the common pen calls."""
        recording = [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((10, 0),)),
            ("curveTo", ((10, 5), (5, 10), (0, 10))),
            ("closePath", ()),
        ]
        assert commands_from_recording(recording) == [
            MoveTo(Point(0.0, 0.0)),
            LineTo(Point(10.0, 0.0)),
            CurveTo(Point(10.0, 5.0), Point(5.0, 10.0), Point(0.0, 10.0)),
            ClosePath(),
        ]

    def test_truetype_quadratic_spline(self):
        """Test implied on-curve points between off-curve points."""
        recording = [("moveTo", ((0, 0),)), ("qCurveTo", ((1, 1), (3, 1), (4, 0))), ("endPath", ())]
        assert commands_from_recording(recording)[1:] == [
            QuadCurveTo(Point(1.0, 1.0), Point(2.0, 1.0)),
            QuadCurveTo(Point(3.0, 1.0), Point(4.0, 0.0)),
        ]

    def test_single_point_qcurve_is_line(self):
        """Test a qCurveTo without off-curve points is a line."""
        recording = [("moveTo", ((0, 0),)), ("qCurveTo", ((4, 0),))]
        assert commands_from_recording(recording)[1] == LineTo(Point(4.0, 0.0))

    def test_super_bezier(self):
        """Test curveTo with more than two off-curve points is decomposed."""
        recording = [("moveTo", ((0, 0),)), ("curveTo", ((0, 5), (5, 10), (10, 10), (15, 5), (15, 0)))]
        commands = commands_from_recording(recording)
        assert all(isinstance(c, CurveTo) for c in commands[1:])
        assert len(commands) > 2
        assert commands[-1].end == Point(15.0, 0.0)

    def test_contour_without_oncurve_points(self):
        """Test closed TrueType contours without on-curve points are rejected."""
        with pytest.raises(ValueError, match="on-curve"):
            commands_from_recording([("qCurveTo", ((0, 0), (10, 0), (10, 10), None))])

    def test_unsupported_method(self):
        """Test component references are rejected."""
        with pytest.raises(ValueError, match="addComponent"):
            commands_from_recording([("addComponent", ("a", (1, 0, 0, 1, 0, 0)))])

    def test_replay_through_pen(self):
        """Test commands survive a round trip through a recording pen."""
        original = list(parse_path("M0,0 L10,0 Q15,5 10,10 C5,15 0,15 0,10 Z"))
        pen = RecordingPen()
        draw_commands(original, pen)
        assert commands_from_recording(pen.value) == original
