"""Tests for FileWalker."""

import os

import pytest

from textbench.exceptions import InputRootNotFoundError, NotFoundError
from textbench.scanning import FileWalker


def _relative_paths(entries):
    return {entry.relative_path.as_posix() for entry in entries}


class TestFileWalker:
    def test_yields_only_matching_extension_recursively(self, input_tree):
        """Nested .txt files are found; .md and .TXT are not."""
        entries = list(FileWalker().walk(input_tree))
        assert _relative_paths(entries) == {"top.txt", "a/b.txt", "a/deeper/c.txt"}

    def test_absolute_and_relative_paths_agree(self, input_tree):
        for entry in FileWalker().walk(input_tree):
            assert entry.absolute_path == input_tree / entry.relative_path
            assert not entry.relative_path.is_absolute()

    def test_custom_extension(self, input_tree):
        entries = list(FileWalker(extension=".md").walk(input_tree))
        assert _relative_paths(entries) == {"a/notes.md"}

    def test_extension_is_case_sensitive(self, input_tree):
        entries = list(FileWalker(extension=".TXT").walk(input_tree))
        assert _relative_paths(entries) == {"upper.TXT"}

    def test_empty_directory_yields_nothing(self, tmp_path):
        assert list(FileWalker().walk(tmp_path)) == []

    def test_missing_root_fails_eagerly(self, tmp_path):
        """The error is raised by walk() itself, before iteration."""
        with pytest.raises(InputRootNotFoundError) as exc_info:
            FileWalker().walk(tmp_path / "nope")
        assert exc_info.value.reason == "Path does not exist"

    def test_root_that_is_a_file_fails(self, tmp_path, make_file):
        path = make_file(tmp_path, "file.txt", "x\n")
        with pytest.raises(NotFoundError):
            FileWalker().walk(path)

    def test_directory_named_like_extension_is_not_a_file(self, tmp_path, make_file):
        make_file(tmp_path, "folder.txt/inner.txt", "x\n")
        entries = list(FileWalker().walk(tmp_path))
        assert _relative_paths(entries) == {"folder.txt/inner.txt"}

    def test_order_is_deterministic(self, input_tree):
        first = [e.relative_path for e in FileWalker().walk(input_tree)]
        second = [e.relative_path for e in FileWalker().walk(input_tree)]
        assert first == second

    def test_excluded_directory_is_not_descended(self, input_tree, make_file):
        make_file(input_tree, "out/top.txt", "old output\n")
        entries = list(FileWalker().walk(input_tree, exclude=input_tree / "a" / ".." / "out"))
        assert _relative_paths(entries) == {"top.txt", "a/b.txt", "a/deeper/c.txt"}


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
class TestSymlinks:
    def _link(self, target, link, is_dir=False):
        try:
            os.symlink(target, link, target_is_directory=is_dir)
        except (OSError, NotImplementedError):
            pytest.skip("cannot create symlinks here")

    def test_symlinks_skipped_by_default(self, tmp_path, make_file):
        root = tmp_path / "root"
        make_file(root, "real.txt", "x\n")
        outside = tmp_path / "outside"
        make_file(outside, "other.txt", "y\n")
        self._link(root / "real.txt", root / "alias.txt")
        self._link(outside, root / "linked", is_dir=True)

        entries = list(FileWalker().walk(root))
        assert _relative_paths(entries) == {"real.txt"}

    def test_followed_symlinks_are_included(self, tmp_path, make_file):
        root = tmp_path / "root"
        make_file(root, "real.txt", "x\n")
        outside = tmp_path / "outside"
        make_file(outside, "other.txt", "y\n")
        self._link(outside, root / "linked", is_dir=True)

        entries = list(FileWalker(follow_symlinks=True).walk(root))
        assert _relative_paths(entries) == {"real.txt", "linked/other.txt"}

    def test_symlink_cycle_terminates(self, tmp_path, make_file):
        """A link back to the root is entered at most once."""
        root = tmp_path / "root"
        make_file(root, "sub/file.txt", "x\n")
        self._link(root, root / "sub" / "loop", is_dir=True)

        entries = list(FileWalker(follow_symlinks=True).walk(root))
        assert "sub/file.txt" in _relative_paths(entries)
        assert len(entries) == 1
