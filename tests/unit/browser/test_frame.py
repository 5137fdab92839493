"""Tests for the immutable listing frame."""

from __future__ import annotations

import dataclasses
import unittest
from pathlib import Path

from dirjump.browser.frame import PARENT_ENTRY, Frame


class FrameTests(unittest.TestCase):
    def test_listing_is_prefixed_with_parent_sentinel(self) -> None:
        frame = Frame.from_listing(Path("/home/u"), ["A", "B"], show_hidden=False)
        self.assertEqual(frame.entries, (PARENT_ENTRY, "A", "B"))
        self.assertEqual(len(frame), 3)

    def test_empty_directory_still_has_sentinel(self) -> None:
        frame = Frame.from_listing(Path("/home/u/empty"), [], show_hidden=True)
        self.assertEqual(frame.entries, (PARENT_ENTRY,))
        self.assertTrue(frame.show_hidden)

    def test_child_path_and_index_lookup(self) -> None:
        frame = Frame.from_listing(Path("/home/u"), ["A", "B"], show_hidden=False)
        self.assertEqual(frame.child_path(2), Path("/home/u/B"))
        self.assertEqual(frame.index_of("B"), 2)
        self.assertEqual(frame.index_of(PARENT_ENTRY), 0)
        self.assertIsNone(frame.index_of("missing"))

    def test_frame_is_immutable(self) -> None:
        frame = Frame.placeholder(Path("/home/u"))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            frame.path = Path("/tmp")  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
