"""Mapping of input-relative paths onto the output tree."""

from pathlib import Path, PurePath

from ..exceptions import FileAccessError, InvalidPathError


def mirror_path(input_root: Path, output_root: Path, relative_path: PurePath) -> Path:
    """
    Compute where a file under ``input_root`` lands under ``output_root``.

    Pure path arithmetic; nothing is created. ``input_root`` is accepted
    for symmetry with the walker but does not affect the result.

    Raises:
        InvalidPathError: If ``relative_path`` is absolute or climbs out
            of the root with ``..``
    """
    rel = PurePath(relative_path)
    if rel.is_absolute():
        raise InvalidPathError(Path(rel), "Expected a path relative to the input root")
    if ".." in rel.parts:
        raise InvalidPathError(Path(rel), "Path escapes the output root")
    return Path(output_root) / rel


class PathMirror:
    """Replicates the input tree's relative structure under an output root."""

    def __init__(self, input_root: Path, output_root: Path):
        self.input_root = Path(input_root)
        self.output_root = Path(output_root)

    def mirror(self, relative_path: PurePath) -> Path:
        return mirror_path(self.input_root, self.output_root, relative_path)

    def ensure_parent_dirs(self, output_path: Path) -> None:
        """
        Create the parent directories of ``output_path``.

        Idempotent: a second call for the same path does nothing.

        Raises:
            FileAccessError: If the filesystem refuses to create a directory
        """
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileAccessError(output_path.parent, f"Cannot create directory: {e}")

    def prepare(self, relative_path: PurePath) -> Path:
        """Mirror ``relative_path`` and make sure its directory exists."""
        output_path = self.mirror(relative_path)
        self.ensure_parent_dirs(output_path)
        return output_path
