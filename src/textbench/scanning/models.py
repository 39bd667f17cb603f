"""Data models for the scanning layer."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileEntry:
    """A matched input file, located both absolutely and under its root."""

    absolute_path: Path
    relative_path: Path

    @property
    def name(self) -> str:
        return self.absolute_path.name
