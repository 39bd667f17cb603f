"""
File operations for textbench.

Every OS-level failure is converted to FileAccessError so the runner can
contain it at the file boundary.
"""

from pathlib import Path
from typing import Iterable

from .exceptions import FileAccessError


def file_size(filepath: Path) -> int:
    """Return the size of a file in bytes."""
    try:
        return filepath.stat().st_size
    except OSError as e:
        raise FileAccessError(filepath, f"Cannot stat: {e}")


def split_lines(text: str) -> list[str]:
    """
    Split text into lines on '\\n' only.

    A trailing newline does not produce an extra empty line, and carriage
    returns stay part of the line they belong to.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(
    filepath: Path,
    encoding: str = "utf-8",
    errors: str = "surrogateescape",
) -> list[str]:
    """
    Read a whole file as a list of lines.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        Lines without their '\\n' terminators

    Raises:
        FileAccessError: If file cannot be read
    """
    try:
        # newline="" keeps '\r' so transforms see the raw line content
        with open(filepath, encoding=encoding, errors=errors, newline="") as f:
            return split_lines(f.read())
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def write_lines(
    filepath: Path,
    lines: Iterable[str],
    encoding: str = "utf-8",
    errors: str = "surrogateescape",
) -> None:
    """
    Write lines to a file, each terminated by '\\n'.

    The parent directory must already exist. An empty ``lines`` still
    creates (or truncates) the file.

    Raises:
        FileAccessError: If file cannot be written
    """
    try:
        with open(filepath, "w", encoding=encoding, errors=errors, newline="") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
    except UnicodeEncodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"Write failed: {e}")
