"""Core conversion algorithms for svg2polylines.

This module contains the core algorithms for:

- Path data parsing (tokenizing, relative/absolute resolution, shorthand expansion)
- Adaptive Bezier curve flattening
- Elliptical arc to Bezier conversion
- Document-level orchestration

The parser and the flattening engine are:
- Stateless across calls (safe for use in worker processes)
- Pure (no side effects besides debug logging)

Key functions:
- parse_path: Path data string to absolute path commands
- flatten_commands: Path commands to polylines
- flatten_path: Path data string to polylines
- arc_to_cubics: Elliptical arc to cubic Bezier segments

Key classes:
- FlattenState: Per-element accumulator used by the flattening engine
- DocumentProcessor: Converts whole documents with per-element isolation
"""

from svg2polylines.core.arc import arc_to_cubics
from svg2polylines.core.flattener import (
    FlattenState,
    apply_command,
    flatten_commands,
    flatten_path,
)
from svg2polylines.core.parser import parse_path, tokenize
from svg2polylines.core.processor import (
    ConversionResult,
    DocumentProcessor,
    process_element,
)

__all__ = [
    # Processor classes
    "ConversionResult",
    "DocumentProcessor",
    # Flattening
    "FlattenState",
    "apply_command",
    "arc_to_cubics",
    "flatten_commands",
    "flatten_path",
    # Parsing
    "parse_path",
    "process_element",
    "tokenize",
]
