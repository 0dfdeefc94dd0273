"""Tests for the command-line interface."""

import json
import logging
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from svg2polylines import __version__
from svg2polylines.cli.app import app

runner = CliRunner()

GOOD_SVG = """<svg xmlns="http://www.w3.org/2000/svg">
  <path id="zigzag" d="M 113,35 H 40 L -39,49 H 40"/>
  <path id="triangle" d="M 10,10 20,15 10,20 Z"/>
</svg>
"""

BROKEN_SVG = """<svg xmlns="http://www.w3.org/2000/svg">
  <path id="zigzag" d="M 113,35 H 40 L -39,49 H 40"/>
  <path id="broken" d="M 0 0 L 5"/>
</svg>
"""


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers and structlog configuration installed by the CLI."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_svg2polylines", False):
            root_logger.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()


@pytest.fixture
def good_svg(tmp_path: Path) -> Path:
    """Write a well-formed document."""
    path = tmp_path / "good.svg"
    path.write_text(GOOD_SVG, encoding="utf-8")
    return path


@pytest.fixture
def broken_svg(tmp_path: Path) -> Path:
    """Write a document with one malformed path."""
    path = tmp_path / "broken.svg"
    path.write_text(BROKEN_SVG, encoding="utf-8")
    return path


class TestConvertCommand:
    """Tests for the convert command."""

    def test_version(self):
        """Test --version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_text_listing(self, good_svg: Path):
        """Test the default output lists the polylines."""
        result = runner.invoke(app, [str(good_svg)])

        assert result.exit_code == 0
        assert "polylines: 2, points: 8" in result.output
        assert "- [(113, 35), (40, 35), (-39, 49), (40, 49)]" in result.output
        assert "- [(10, 10), (20, 15), (10, 20), (10, 10)]" in result.output

    def test_json_output(self, good_svg: Path):
        """Test --json prints the polylines as JSON."""
        result = runner.invoke(app, [str(good_svg), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 2
        assert data[0][0] == {"x": 113.0, "y": 35.0}

    def test_output_file(self, tmp_path: Path, good_svg: Path):
        """Test -o writes the JSON file and prints a summary."""
        output = tmp_path / "out.json"
        result = runner.invoke(app, [str(good_svg), "-o", str(output)])

        assert result.exit_code == 0
        assert "Complete" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [len(polyline) for polyline in data] == [4, 4]

    def test_quiet_output_file(self, tmp_path: Path, good_svg: Path):
        """Test --quiet prints nothing when writing to a file."""
        output = tmp_path / "out.json"
        result = runner.invoke(app, [str(good_svg), "-q", "-o", str(output)])

        assert result.exit_code == 0
        assert result.output.strip() == ""
        assert output.exists()

    def test_tolerance_option(self, tmp_path: Path):
        """Test a smaller tolerance gives more points."""
        svg_path = tmp_path / "curve.svg"
        svg_path.write_text('<svg><path d="M0,0 C0,50 50,50 50,0"/></svg>', encoding="utf-8")

        coarse = runner.invoke(app, [str(svg_path), "--json", "-t", "5"])
        fine = runner.invoke(app, [str(svg_path), "--json", "-t", "0.01"])

        assert len(json.loads(fine.stdout)[0]) > len(json.loads(coarse.stdout)[0])

    def test_malformed_path_skipped(self, broken_svg: Path):
        """Test malformed paths are reported and skipped by default."""
        result = runner.invoke(app, [str(broken_svg)])

        assert result.exit_code == 0
        assert "polylines: 1, points: 4" in result.output
        assert "broken" in result.output
        assert "Path element discarded" not in result.output

    def test_log_level_shows_discard_warnings(self, broken_svg: Path):
        """Test --log-level WARNING adds structured warnings for discarded paths."""
        result = runner.invoke(app, [str(broken_svg), "--log-level", "WARNING"])

        assert result.exit_code == 0
        assert "Path element discarded" in result.output

    def test_strict_fails_on_malformed_path(self, broken_svg: Path):
        """Test --strict aborts with exit code 1."""
        result = runner.invoke(app, [str(broken_svg), "--strict"])

        assert result.exit_code == 1
        assert "broken" in result.output

    def test_log_file(self, tmp_path: Path, good_svg: Path):
        """Test --log-file writes structured events."""
        log_file = tmp_path / "run.log"
        result = runner.invoke(app, [str(good_svg), "-q", "--log-file", str(log_file)])

        assert result.exit_code == 0
        assert "Conversion complete" in log_file.read_text(encoding="utf-8")

    def test_verbose_shows_progress_steps(self, good_svg: Path):
        """Test --verbose prints the processing steps and summary."""
        result = runner.invoke(app, [str(good_svg), "-v"])

        assert result.exit_code == 0
        assert "Flattening paths" in result.output
        assert "2 path elements" in result.output
        assert "Complete" in result.output


class TestConvertErrors:
    """Tests for CLI error handling."""

    def test_missing_file(self, tmp_path: Path):
        """Test a missing input file exits with code 1."""
        result = runner.invoke(app, [str(tmp_path / "missing.svg")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_directory_input(self, tmp_path: Path):
        """Test a directory is rejected."""
        result = runner.invoke(app, [str(tmp_path)])
        assert result.exit_code == 1
        assert "not a file" in result.output

    def test_malformed_document(self, tmp_path: Path):
        """Test malformed XML exits with code 1."""
        svg_path = tmp_path / "bad.svg"
        svg_path.write_text("<svg><path d='M0,0'>", encoding="utf-8")

        result = runner.invoke(app, [str(svg_path)])
        assert result.exit_code == 1
        assert "Could not load document" in result.output

    @pytest.mark.parametrize("tolerance", ["0", "-1"])
    def test_invalid_tolerance(self, good_svg: Path, tolerance: str):
        """Test a non-positive tolerance is rejected."""
        result = runner.invoke(app, [str(good_svg), f"--tolerance={tolerance}"])
        assert result.exit_code == 1
        assert "Invalid tolerance" in result.output

    def test_max_depth_out_of_range(self, good_svg: Path):
        """Test the depth cap is range-checked."""
        result = runner.invoke(app, [str(good_svg), "--max-depth", "30"])
        assert result.exit_code == 2

    def test_verbose_and_quiet(self, good_svg: Path):
        """Test --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, [str(good_svg), "-v", "-q"])
        assert result.exit_code == 1

    def test_unwritable_output(self, tmp_path: Path, good_svg: Path):
        """Test output write failures exit with code 1."""
        output = tmp_path / "missing" / "out.json"
        result = runner.invoke(app, [str(good_svg), "-o", str(output)])
        assert result.exit_code == 1
        assert "Could not write output" in result.output
