"""Tests for single-directory reads and entry metadata."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazyls.entry_model import EntryKind, count_children, entry_name, read_entries, read_entry
from lazyls.errors import ListingIOError


class ReadEntriesTests(unittest.TestCase):
    def test_hidden_entries_are_skipped_unless_requested(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".secret").write_text("x", encoding="utf-8")
            (root / "visible.txt").write_text("y", encoding="utf-8")

            hidden_off = {entry.name for entry in read_entries(root, show_hidden=False)}
            hidden_on = {entry.name for entry in read_entries(root, show_hidden=True)}

            self.assertEqual(hidden_off, {"visible.txt"})
            self.assertEqual(hidden_on, {".secret", "visible.txt"})

    def test_files_carry_size_and_directories_do_not(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "data.bin").write_bytes(b"12345")
            (root / "sub").mkdir()

            by_name = {entry.name: entry for entry in read_entries(root, show_hidden=False)}

            self.assertEqual(by_name["data.bin"].kind, EntryKind.FILE)
            self.assertEqual(by_name["data.bin"].size, 5)
            self.assertIsNotNone(by_name["data.bin"].mtime_ns)
            self.assertEqual(by_name["sub"].kind, EntryKind.DIRECTORY)
            self.assertEqual(by_name["sub"].size, 0)
            self.assertEqual(by_name["sub"].path, root / "sub")

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks are required")
    def test_symlinks_are_reported_as_links_not_targets(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target_dir = root / "real"
            target_dir.mkdir()
            target_file = root / "real.txt"
            target_file.write_text("content", encoding="utf-8")
            os.symlink(target_dir, root / "link_dir")
            os.symlink(target_file, root / "link_file")

            by_name = {entry.name: entry for entry in read_entries(root, show_hidden=False)}

            self.assertEqual(by_name["link_dir"].kind, EntryKind.SYMLINK)
            self.assertFalse(by_name["link_dir"].is_dir)
            self.assertEqual(by_name["link_file"].kind, EntryKind.SYMLINK)
            self.assertEqual(by_name["link_file"].size, 0)

    def test_read_only_file_is_not_writable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "locked.txt"
            target.write_text("x", encoding="utf-8")
            target.chmod(0o444)
            try:
                self.assertFalse(read_entry(target).writable)
            finally:
                target.chmod(0o644)
            self.assertTrue(read_entry(target).writable)

    def test_missing_directory_raises_listing_io_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope"
            with self.assertRaises(ListingIOError) as ctx:
                read_entries(missing, show_hidden=False)
            self.assertIn(str(missing), str(ctx.exception))
            self.assertEqual(ctx.exception.path, missing)

    def test_reading_a_file_as_directory_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")
            with self.assertRaises(ListingIOError):
                read_entries(target, show_hidden=True)


class EntryHelpersTests(unittest.TestCase):
    def test_entry_name_falls_back_to_full_path_for_roots(self) -> None:
        self.assertEqual(entry_name(Path("/")), "/")
        self.assertEqual(entry_name(Path("/tmp/demo.txt")), "demo.txt")

    def test_count_children_includes_hidden_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a").mkdir()
            (root / ".b").mkdir()
            (root / "c.txt").write_text("c", encoding="utf-8")

            self.assertEqual(count_children(root), (2, 1))

    def test_display_name_replaces_undecodable_bytes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            raw_name = os.fsdecode(b"bad\xffname")
            try:
                (root / raw_name).write_text("x", encoding="utf-8")
            except (OSError, UnicodeEncodeError):
                self.skipTest("filesystem rejects undecodable names")

            entry = read_entries(root, show_hidden=False)[0]

            self.assertEqual(entry.name, raw_name)
            self.assertEqual(entry.display_name, "bad�name")


if __name__ == "__main__":
    unittest.main()
