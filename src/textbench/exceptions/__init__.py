"""Exception hierarchy for textbench."""

from .base import TextBenchError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)
from .pipeline import (
    FileAccessError,
    InputRootNotFoundError,
    NotFoundError,
    PipelineError,
    UnknownTransformError,
    WordCountParseError,
)

__all__ = [
    "TextBenchError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidPathError",
    "PipelineError",
    "InputRootNotFoundError",
    "NotFoundError",
    "FileAccessError",
    "WordCountParseError",
    "UnknownTransformError",
]
