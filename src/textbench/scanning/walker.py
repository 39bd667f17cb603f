"""Recursive discovery of input files by extension."""

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from ..exceptions import InputRootNotFoundError
from ..logging_config import get_logger
from .models import FileEntry

logger = get_logger(__name__)

DEFAULT_EXTENSION = ".txt"


class FileWalker:
    """Enumerates regular files with a given extension under a root.

    Symlinked files and directories are skipped unless ``follow_symlinks``
    is set. When they are followed, each directory is entered at most once
    (keyed by device and inode), which bounds symlink cycles.
    """

    def __init__(self, extension: str = DEFAULT_EXTENSION, follow_symlinks: bool = False):
        self.extension = extension
        self.follow_symlinks = follow_symlinks

    def walk(self, input_root: Path, exclude: Optional[Path] = None) -> Iterator[FileEntry]:
        """
        Validate ``input_root`` and return a lazy iterator over its matches.

        The root check runs immediately, so a missing root fails before
        any file is touched. A directory resolving to ``exclude`` (typically
        an output root nested inside the input) is never descended into.

        Raises:
            InputRootNotFoundError: If the root is missing or not a directory
        """
        root = Path(input_root)
        if not root.exists():
            raise InputRootNotFoundError(root, "Path does not exist")
        if not root.is_dir():
            raise InputRootNotFoundError(root, "Path is not a directory")

        excluded = Path(exclude).resolve() if exclude is not None else None
        return self._iter_entries(root, excluded)

    def _iter_entries(self, root: Path, excluded: Optional[Path]) -> Iterator[FileEntry]:
        visited_dirs: set[tuple[int, int]] = set()
        matched = 0

        for dirpath, dirnames, filenames in os.walk(
            root, followlinks=self.follow_symlinks, onerror=self._on_walk_error
        ):
            current = Path(dirpath)

            if self.follow_symlinks:
                key = self._dir_key(current)
                if key is not None and key in visited_dirs:
                    logger.warning(f"Symlink cycle detected, not re-entering {current}")
                    dirnames[:] = []
                    continue
                if key is not None:
                    visited_dirs.add(key)
            else:
                dirnames[:] = [d for d in dirnames if not (current / d).is_symlink()]

            if excluded is not None:
                dirnames[:] = [d for d in dirnames if (current / d).resolve() != excluded]

            # Sorted so repeated runs visit files in the same order
            dirnames.sort()

            for filename in sorted(filenames):
                filepath = current / filename

                if Path(filename).suffix != self.extension:
                    continue
                if filepath.is_symlink() and not self.follow_symlinks:
                    logger.debug(f"Skipped (symlink): {filepath}")
                    continue
                if not filepath.is_file():
                    continue

                matched += 1
                yield FileEntry(
                    absolute_path=filepath,
                    relative_path=filepath.relative_to(root),
                )

        logger.debug(f"Walk complete: {matched} '{self.extension}' files under {root}")

    @staticmethod
    def _dir_key(path: Path):
        try:
            st = path.stat()
        except OSError:
            return None
        return (st.st_dev, st.st_ino)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Cannot list directory {error.filename}: {error.strerror}")
