"""Pipeline exceptions: input roots, per-file I/O, word-count lines.

Propagation policy:
    InputRootNotFoundError  fatal, raised before any file is processed
    FileAccessError         contained, the runner skips that one file
    WordCountParseError     dropped, the transform discards the line
"""

from pathlib import Path
from typing import List

from .base import TextBenchError


class PipelineError(TextBenchError):
    """Base class for errors raised while running a batch."""
    pass


class InputRootNotFoundError(PipelineError):
    """Raised when the input root is missing or is not a directory."""

    fatal = True

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Input directory not found: {path}",
            details={"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason


NotFoundError = InputRootNotFoundError


class FileAccessError(PipelineError):
    """Raised when a file cannot be stat'ed, read, or written."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": filepath, "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class WordCountParseError(PipelineError):
    """Raised when a line is not of the form '<word> <count>'."""

    def __init__(self, line: str, reason: str):
        super().__init__(
            f"Malformed word-count line: {line!r}",
            details={"reason": reason},
        )
        self.line = line
        self.reason = reason


class UnknownTransformError(PipelineError):
    """Raised when a transform name is not registered."""

    def __init__(self, name: str, available: List[str]):
        super().__init__(
            f"Unknown transform: {name}",
            details={"name": name, "available": ", ".join(available)},
        )
        self.name = name
        self.available = available
