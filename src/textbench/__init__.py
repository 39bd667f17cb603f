"""
textbench - batch text-file transforms with throughput telemetry.

Walks a directory tree, applies one pluggable transform (line
sanitization, word-count extraction, word-count re-sort) to every matching
file, mirrors the tree into an output directory, and reports per-file
throughput against file size.
"""

__version__ = "0.1.0"

from .config import RunConfig, load_config
from .runner import FileFailure, InstrumentedRunner, RunResult
from .stats import FileSample, RunTotals
from .transforms import TextTransform, get_transform

__all__ = [
    "InstrumentedRunner",  # Main entry point
    "RunResult",
    "FileFailure",
    "FileSample",
    "RunTotals",
    "RunConfig",
    "load_config",
    "TextTransform",
    "get_transform",
]
