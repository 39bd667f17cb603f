"""Tests for PathMirror."""

import os
from pathlib import Path, PurePath

import pytest

from textbench.exceptions import FileAccessError, InvalidPathError
from textbench.scanning import PathMirror, mirror_path


class TestMirrorPath:
    def test_joins_relative_path_under_output_root(self, tmp_path):
        out = mirror_path(tmp_path / "in", tmp_path / "out", PurePath("a/b.txt"))
        assert out == tmp_path / "out" / "a" / "b.txt"

    def test_rejects_absolute_relative_path(self, tmp_path):
        with pytest.raises(InvalidPathError):
            mirror_path(tmp_path, tmp_path / "out", tmp_path / "a.txt")

    def test_rejects_parent_traversal(self, tmp_path):
        with pytest.raises(InvalidPathError):
            mirror_path(tmp_path, tmp_path / "out", PurePath("../escape.txt"))


class TestPathMirror:
    def test_prepare_creates_parent_directories(self, tmp_path):
        mirror = PathMirror(tmp_path / "in", tmp_path / "out")
        out = mirror.prepare(Path("x/y/z.txt"))
        assert out.parent.is_dir()
        assert not out.exists()

    def test_ensure_parent_dirs_is_idempotent(self, tmp_path):
        mirror = PathMirror(tmp_path / "in", tmp_path / "out")
        out = mirror.mirror(Path("x/z.txt"))
        mirror.ensure_parent_dirs(out)
        mirror.ensure_parent_dirs(out)
        assert out.parent.is_dir()

    def test_directory_creation_failure_is_file_access_error(self, tmp_path):
        """A regular file where a directory should go cannot be mkdir'ed."""
        (tmp_path / "out").mkdir()
        (tmp_path / "out" / "blocker").write_text("not a dir")
        mirror = PathMirror(tmp_path / "in", tmp_path / "out")
        with pytest.raises(FileAccessError):
            mirror.prepare(Path("blocker/file.txt"))

    @pytest.mark.skipif(
        os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permission bits not enforced",
    )
    def test_permission_denied_is_file_access_error(self, tmp_path):
        locked = tmp_path / "out"
        locked.mkdir()
        locked.chmod(0o500)
        try:
            mirror = PathMirror(tmp_path / "in", locked)
            with pytest.raises(FileAccessError):
                mirror.prepare(Path("sub/file.txt"))
        finally:
            locked.chmod(0o700)
