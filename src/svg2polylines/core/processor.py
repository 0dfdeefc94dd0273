"""Document-level orchestration of the conversion pipeline.

This module runs the flattening engine once per path element of a
document, isolates failures per element, and optionally spreads elements
over worker processes using ProcessPoolExecutor.

Key components:
- process_element: Top-level picklable function for parallel execution
- DocumentProcessor: Main orchestrator class
- ConversionResult: Polylines plus run statistics
"""

import logging
import time
import traceback
from collections.abc import Callable, Iterable
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from svg2polylines.config import FlattenConfig, Svg2PolylinesSettings
from svg2polylines.core.flattener import flatten_path
from svg2polylines.domain import PathElement, Polyline
from svg2polylines.exceptions import ElementProcessingError, MalformedPathDataError
from svg2polylines.io.reader import SvgReader
from svg2polylines.utils import ProcessingLogger, ProcessingStats

ProgressCallback = Callable[[int, int, str, bool], None]


@dataclass
class ConversionResult:
    """Output of a document conversion.

    Attributes:
        polylines: Polylines of all elements, in document order
        stats: Counts, timings and errors of the run
    """

    polylines: list[Polyline]
    stats: ProcessingStats


def process_element(
    element_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Flatten a single path element.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        element_dict: Serialized element (from PathElement.to_dict())
        config_dict: Serialized flatten configuration

    Returns:
        Dictionary containing either:
        - Success: {"polylines": [[{"x", "y"}, ...], ...], "duration_ms": float}
        - Malformed data: {"error": str, "malformed": True, "element_id": str, ...}
        - Other failure: {"error": str, "malformed": False, "traceback": str, ...}
    """
    start_time = time.time()
    element = PathElement.from_dict(element_dict)

    try:
        config = FlattenConfig(**config_dict)
        polylines = flatten_path(
            element.data,
            tolerance=config.tolerance,
            max_depth=config.max_depth,
            element_id=element.element_id,
        )
        duration_ms = (time.time() - start_time) * 1000
        return {
            "polylines": [p.to_list() for p in polylines],
            "duration_ms": duration_ms,
        }

    except MalformedPathDataError as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "malformed": True,
            "reason": e.reason,
            "position": e.position,
            "element_id": element.element_id,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "malformed": False,
            "element_id": element.element_id,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class DocumentProcessor:
    """Orchestrates conversion of a document's path elements.

    Manages the complete workflow:
    1. Read path elements from the document
    2. Skip elements without path data
    3. Flatten elements, in-line or in worker processes
    4. Collect results in document order and update statistics

    Example:
        settings = Svg2PolylinesSettings()
        processor = DocumentProcessor(settings)
        result = processor.process_file(Path("drawing.svg"))
        print(len(result.polylines))
    """

    def __init__(
        self,
        config: Svg2PolylinesSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize document processor with configuration.

        Args:
            config: Settings for flattening and processing (defaults if None)
            logger: Structured logger; if None, events go to the standard
                "svg2polylines" logger and are filtered by its handlers
        """
        self.config = config if config is not None else Svg2PolylinesSettings()
        if logger is None:
            logger = structlog.wrap_logger(
                logging.getLogger("svg2polylines"),
                wrapper_class=structlog.stdlib.BoundLogger,
            )
        self.logger = logger

    def process_file(
        self,
        svg_path: Path,
        progress_callback: ProgressCallback | None = None,
    ) -> ConversionResult:
        """Convert an SVG file.

        Args:
            svg_path: Path to the SVG document
            progress_callback: Optional callback(completed, total, element_id, success)

        Returns:
            ConversionResult with polylines and statistics

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentLoadError: If the file is not well-formed XML
            MalformedPathDataError: If an element is malformed and
                processing.skip_malformed is disabled
        """
        self.logger.info("Loading document", input=str(svg_path))
        with SvgReader(svg_path) as reader:
            elements = list(reader.iter_path_elements())
        return self.process_elements(elements, progress_callback=progress_callback)

    def process_string(
        self,
        svg: str,
        progress_callback: ProgressCallback | None = None,
    ) -> ConversionResult:
        """Convert SVG document text.

        Args:
            svg: SVG document text
            progress_callback: Optional callback(completed, total, element_id, success)

        Returns:
            ConversionResult with polylines and statistics
        """
        reader = SvgReader.from_string(svg)
        elements = list(reader.iter_path_elements())
        return self.process_elements(elements, progress_callback=progress_callback)

    def process_elements(
        self,
        elements: Iterable[PathElement],
        progress_callback: ProgressCallback | None = None,
    ) -> ConversionResult:
        """Convert path elements to polylines.

        Args:
            elements: Path elements in document order
            progress_callback: Optional callback(completed, total, element_id, success)

        Returns:
            ConversionResult with polylines in element order

        Raises:
            MalformedPathDataError: If an element is malformed and
                processing.skip_malformed is disabled
            ElementProcessingError: If an element fails otherwise and
                processing.skip_malformed is disabled
            KeyboardInterrupt: If processing is cancelled by user
        """
        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()

        to_process: list[PathElement] = []
        for element in elements:
            if element.is_empty():
                processing_logger.log_element_skipped(element.element_id, "empty path data")
                continue
            to_process.append(element)

        max_workers = self.config.processing.max_workers
        self.logger.info(
            "Starting conversion",
            elements=len(to_process),
            skipped=stats.skipped_count,
            tolerance=self.config.flatten.tolerance,
            max_workers=max_workers,
        )

        if max_workers is not None and max_workers > 1 and len(to_process) > 1:
            results = self._process_parallel(to_process, max_workers, progress_callback)
        else:
            results = self._process_sequential(to_process, progress_callback)

        polylines: list[Polyline] = []
        for element in to_process:
            result = results[element.index]
            if "error" in result:
                self._handle_error(processing_logger, element, result)
                continue

            element_polylines = [Polyline.from_list(p) for p in result["polylines"]]
            polylines.extend(element_polylines)
            processing_logger.log_element_complete(
                element_id=element.element_id,
                polylines=len(element_polylines),
                points=sum(len(p) for p in element_polylines),
                duration_ms=result.get("duration_ms", 0.0),
            )

        stats.end_time = time.time()

        self.logger.info(
            "Conversion complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            polylines=stats.polyline_count,
            points=stats.point_count,
            duration_seconds=round(stats.duration_seconds, 3),
        )

        return ConversionResult(polylines=polylines, stats=stats)

    def _handle_error(
        self,
        processing_logger: ProcessingLogger,
        element: PathElement,
        result: dict[str, Any],
    ) -> None:
        """Record a failed element, or abort when failures are fatal."""
        strict = not self.config.processing.skip_malformed
        if result.get("malformed"):
            error: Exception = MalformedPathDataError(
                result["reason"],
                position=result.get("position"),
                element_id=element.element_id,
            )
            if strict:
                raise error
            processing_logger.log_element_error(element.element_id, error)
        else:
            error = ElementProcessingError(element.element_id, result["error"])
            if strict:
                self.logger.error(
                    "Path element failed",
                    element=element.element_id,
                    traceback=result.get("traceback"),
                )
                raise error
            processing_logger.log_element_error(
                element.element_id,
                error,
                traceback=result.get("traceback"),
            )

    def _process_sequential(
        self,
        elements: list[PathElement],
        progress_callback: ProgressCallback | None,
    ) -> dict[int, dict[str, Any]]:
        """Flatten elements one after another in this process.

        Stops at the first failed element when skip_malformed is disabled.
        """
        config_dict = self.config.flatten.model_dump()
        results: dict[int, dict[str, Any]] = {}
        total = len(elements)

        for completed, element in enumerate(elements, start=1):
            self.logger.debug("Processing path element", element=element.element_id)
            result = process_element(element.to_dict(), config_dict)
            results[element.index] = result

            if progress_callback is not None:
                progress_callback(completed, total, element.element_id, "error" not in result)

            if "error" in result and not self.config.processing.skip_malformed:
                break

        return results

    def _process_parallel(
        self,
        elements: list[PathElement],
        max_workers: int,
        progress_callback: ProgressCallback | None,
    ) -> dict[int, dict[str, Any]]:
        """Flatten elements in worker processes.

        Args:
            elements: Elements to flatten
            max_workers: Maximum worker processes
            progress_callback: Optional progress callback

        Returns:
            Results keyed by element index
        """
        config_dict = self.config.flatten.model_dump()
        results: dict[int, dict[str, Any]] = {}
        total = len(elements)
        completed = 0
        pending_futures: dict[Future[dict[str, Any]], PathElement] = {}

        self.logger.info(
            "Starting parallel processing",
            element_count=total,
            max_workers=max_workers,
        )

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for element in elements:
                future = executor.submit(process_element, element.to_dict(), config_dict)
                pending_futures[future] = element

            try:
                for future in as_completed(list(pending_futures)):
                    element = pending_futures.pop(future)

                    try:
                        result = future.result()
                    except Exception as e:
                        # Executor-level error (e.g. a worker died)
                        result = {
                            "error": str(e),
                            "malformed": False,
                            "element_id": element.element_id,
                            "traceback": traceback.format_exc(),
                        }

                    results[element.index] = result
                    completed += 1
                    if progress_callback is not None:
                        progress_callback(
                            completed, total, element.element_id, "error" not in result
                        )

            except KeyboardInterrupt:
                self.logger.info(
                    "Cancellation requested by user",
                    pending=len(pending_futures),
                )
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return results
