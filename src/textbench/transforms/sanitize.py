"""Line sanitization: keep ASCII alphanumerics and collapse delimiter runs."""

import string
from collections.abc import Sequence
from itertools import groupby

from .base import TextTransform, TransformResult

DELIMITERS = frozenset(" \t\n\r")
ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits) | DELIMITERS


def is_allowed(ch: str) -> bool:
    return ch in ALLOWED_CHARACTERS


def collapse_delimiters(text: str) -> str:
    """Replace each run of 2+ identical delimiter characters with one."""
    parts = []
    for ch, run in groupby(text):
        if ch in DELIMITERS:
            parts.append(ch)
        else:
            parts.append("".join(run))
    return "".join(parts)


def sanitize_line(line: str) -> str:
    """
    Clean a single line.

    Carriage returns are stripped, every character outside the allowed
    class is deleted, and then identical delimiter runs are collapsed.
    Deletion happens first, so "a !! b" collapses to "a b".
    """
    without_cr = line.replace("\r", "")
    filtered = "".join(ch for ch in without_cr if is_allowed(ch))
    return collapse_delimiters(filtered)


class SanitizeLines(TextTransform):
    name = "sanitize"
    description = "Strip non-alphanumeric characters and collapse repeated delimiters"
    metric = "size"
    x_label = "MiB"
    y_label = "MiB/second"
    title = "Throughput vs. Dataset Size"

    def apply(self, lines: Sequence[str]) -> TransformResult:
        cleaned = [sanitize_line(line) for line in lines]
        return TransformResult(lines=cleaned, item_count=len(cleaned))
