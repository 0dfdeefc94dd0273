"""Logging utilities for svg2polylines."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from a document conversion run."""

    processed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    polyline_count: int = 0
    point_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    element_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_element_time_ms(self) -> float | None:
        """Average processing time per element, if any were timed."""
        if not self.element_timings_ms:
            return None
        return sum(self.element_timings_ms) / len(self.element_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from a previous configuration
    for handler in list(root_logger.handlers):
        if getattr(handler, "_svg2polylines", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._svg2polylines = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._svg2polylines = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svg2polylines")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking conversion progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_element_complete(
        self,
        element_id: str,
        polylines: int,
        points: int,
        duration_ms: float,
    ) -> None:
        """Log successful path element processing."""
        self._logger.info(
            "Path element flattened",
            element=element_id,
            polylines=polylines,
            points=points,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.polyline_count += polylines
        self._stats.point_count += points
        self._stats.element_timings_ms.append(duration_ms)

    def log_element_skipped(self, element_id: str, reason: str) -> None:
        """Log skipped path element."""
        self._logger.debug("Path element skipped", element=element_id, reason=reason)
        self._stats.skipped_count += 1

    def log_element_error(
        self,
        element_id: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log path element processing error."""
        self._logger.warning(
            "Path element discarded",
            element=element_id,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((element_id, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
