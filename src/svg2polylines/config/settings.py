"""Configuration settings for svg2polylines."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TOLERANCE = 0.15
DEFAULT_MAX_DEPTH = 16


class FlattenConfig(BaseModel):
    """Configuration for curve flattening.

    Tolerances are expressed in document units; no unit conversion is
    performed, so a tolerance of 0.15 means 0.15 user units of the SVG.
    """

    tolerance: float = Field(
        default=DEFAULT_TOLERANCE,
        gt=0.0,
        description="Maximum perpendicular deviation between polyline and curve",
    )
    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        le=24,
        description="Subdivision depth cap per curve (at most 2**max_depth segments)",
    )


class ProcessingConfig(BaseModel):
    """Configuration for document processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None or 1 = process in-line)",
    )
    skip_malformed: bool = Field(
        default=True,
        description="Skip path elements with malformed data instead of aborting",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class Svg2PolylinesSettings(BaseModel):
    """Main application settings."""

    flatten: FlattenConfig = Field(default_factory=FlattenConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> Svg2PolylinesSettings:
    """Get default application settings."""
    return Svg2PolylinesSettings()
