"""CLI application entry point for svg2polylines.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from svg2polylines import __version__
from svg2polylines.cli.output import (
    console,
    create_progress,
    print_cancellation_notice,
    print_discarded,
    print_document_info,
    print_error,
    print_header,
    print_polylines,
    print_step,
    print_summary,
)
from svg2polylines.config import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_TOLERANCE,
    FlattenConfig,
    LoggingConfig,
    ProcessingConfig,
    Svg2PolylinesSettings,
)
from svg2polylines.core import ConversionResult, DocumentProcessor
from svg2polylines.exceptions import (
    DocumentLoadError,
    MalformedPathDataError,
    OutputWriteError,
    Svg2PolylinesError,
)
from svg2polylines.io import PolylineWriter, SvgReader, polylines_to_json
from svg2polylines.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="svg2polylines",
    help="Convert the path geometry of an SVG document to polylines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svg2polylines[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to input SVG file",
            show_default=False,
        ),
    ],
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Maximum deviation between curves and polylines, in document units",
        ),
    ] = DEFAULT_TOLERANCE,
    max_depth: Annotated[
        int,
        typer.Option(
            "--max-depth",
            help="Subdivision depth cap per curve (1-24)",
            min=1,
            max=24,
        ),
    ] = DEFAULT_MAX_DEPTH,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write polylines as JSON to this file",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print polylines as JSON instead of the text listing",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel worker processes (default: in-process)",
            min=1,
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Abort on the first malformed path instead of skipping it",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "ERROR",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert the paths of an SVG document to polylines.

    Every element with path data is flattened: lines are kept, curves and
    arcs are approximated by straight segments within the tolerance.

    Example:
        svg2polylines drawing.svg -t 0.1 -o drawing.json
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if tolerance <= 0:
        print_error(
            f"Invalid tolerance: {tolerance}",
            details="The tolerance must be a positive number.",
        )
        raise typer.Exit(code=1)

    if not input_svg.exists():
        print_error(
            f"Input file not found: {input_svg}",
            details=f"The file '{input_svg}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_svg.is_file():
        print_error(
            f"Input path is not a file: {input_svg}",
            details="Please provide a path to an SVG file.",
        )
        raise typer.Exit(code=1)

    settings = Svg2PolylinesSettings(
        flatten=FlattenConfig(tolerance=tolerance, max_depth=max_depth),
        processing=ProcessingConfig(max_workers=workers, skip_malformed=not strict),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="INFO" if verbose else log_level,
        ),
    )

    # The text listing and JSON go to stdout; decorations only when wanted
    show_decorations = verbose and not as_json

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        if show_decorations:
            print_header(__version__)
            print_step("Loading document")

        with SvgReader(input_svg) as reader:
            elements = list(reader.iter_path_elements())

        if show_decorations:
            print_document_info(str(input_svg), len(elements), tolerance)
            print_step("Flattening paths")

        processor = DocumentProcessor(settings, logger=logger)
        result = _run(processor, elements, show_progress=show_decorations)

        if output is not None:
            PolylineWriter(output).write(result.polylines)

        if as_json:
            if output is None:
                typer.echo(polylines_to_json(result.polylines))
        elif not quiet and output is None:
            print_polylines(result.polylines)

        stats = result.stats
        if stats.errors and not quiet:
            print_discarded(stats.errors)

        if show_decorations or (output is not None and not quiet and not as_json):
            print_summary(
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                polylines=stats.polyline_count,
                points=stats.point_count,
                errors=stats.error_count,
                output_path=str(output) if output is not None else None,
            )

    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_notice()
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except DocumentLoadError as e:
        print_error(f"Could not load document: {e.reason}")
        raise typer.Exit(code=1)
    except MalformedPathDataError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write output: {e.reason}")
        raise typer.Exit(code=1)
    except Svg2PolylinesError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _run(
    processor: DocumentProcessor,
    elements: list,
    show_progress: bool,
) -> ConversionResult:
    """Run the processor, with a progress bar when requested."""
    if not show_progress:
        return processor.process_elements(elements)

    with create_progress() as progress:
        task_id = progress.add_task(
            f"Flattening {len(elements)} paths",
            total=len(elements),
        )

        def update_progress(completed: int, *_: object) -> None:
            progress.update(task_id, completed=completed)

        return processor.process_elements(elements, progress_callback=update_progress)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
