"""Pluggable per-file text transforms."""

from .base import TextTransform, TransformResult
from .registry import available_transforms, get_transform
from .sanitize import SanitizeLines, sanitize_line
from .word_counts import (
    ExtractAndSortWordCounts,
    ResortWordCounts,
    WordCount,
    parse_word_count,
)

__all__ = [
    "TextTransform",
    "TransformResult",
    "SanitizeLines",
    "sanitize_line",
    "ExtractAndSortWordCounts",
    "ResortWordCounts",
    "WordCount",
    "parse_word_count",
    "available_transforms",
    "get_transform",
]
