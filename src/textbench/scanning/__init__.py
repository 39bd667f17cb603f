"""Input tree traversal and output tree mirroring."""

from .mirror import PathMirror, mirror_path
from .models import FileEntry
from .walker import DEFAULT_EXTENSION, FileWalker

__all__ = [
    "DEFAULT_EXTENSION",
    "FileEntry",
    "FileWalker",
    "PathMirror",
    "mirror_path",
]
