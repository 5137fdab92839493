"""Filesystem tests for subdirectory listing."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from dirjump.listing import DirectoryListError, canonical_path, list_subdirectories


class ListSubdirectoriesTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()

    def test_lists_only_directories_sorted_case_insensitively(self) -> None:
        for name in ("beta", "Alpha", "gamma"):
            (self.root / name).mkdir()
        (self.root / "file.txt").write_text("x", encoding="utf-8")

        self.assertEqual(list_subdirectories(self.root, show_hidden=False), ["Alpha", "beta", "gamma"])

    def test_hidden_directories_follow_flag(self) -> None:
        (self.root / ".config").mkdir()
        (self.root / "src").mkdir()

        self.assertEqual(list_subdirectories(self.root, show_hidden=False), ["src"])
        self.assertEqual(list_subdirectories(self.root, show_hidden=True), [".config", "src"])

    def test_symlinked_directory_counts_as_directory(self) -> None:
        (self.root / "real").mkdir()
        try:
            os.symlink(self.root / "real", self.root / "link")
        except (OSError, NotImplementedError):
            self.skipTest("symlinks unavailable")
        os.symlink(self.root / "missing", self.root / "dangling")

        self.assertEqual(list_subdirectories(self.root, show_hidden=False), ["link", "real"])

    def test_empty_directory(self) -> None:
        self.assertEqual(list_subdirectories(self.root, show_hidden=True), [])

    def test_missing_directory_raises_list_error(self) -> None:
        missing = self.root / "nope"
        with self.assertRaises(DirectoryListError) as ctx:
            list_subdirectories(missing, show_hidden=False)
        self.assertEqual(ctx.exception.path, missing)
        self.assertIsInstance(ctx.exception, OSError)

    def test_file_path_raises_list_error(self) -> None:
        target = self.root / "file.txt"
        target.write_text("x", encoding="utf-8")
        with self.assertRaises(DirectoryListError):
            list_subdirectories(target, show_hidden=False)


class CanonicalPathTests(unittest.TestCase):
    def test_resolves_relative_and_trailing_components(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a").mkdir()
            self.assertEqual(canonical_path(f"{root}/a/../a/"), root / "a")

    def test_expands_user_home(self) -> None:
        self.assertEqual(canonical_path("~"), Path.home().resolve())


if __name__ == "__main__":
    unittest.main()
