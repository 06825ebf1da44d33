"""Tests for the folder cache: memoization, pre-warm, and its bounds."""

from __future__ import annotations

import unittest
from pathlib import Path

from pagedir.folder_cache import FolderCache
from tests.support import FakeFileSystem, sample_tree


class FolderCacheTests(unittest.TestCase):
    def test_second_lookup_is_served_without_listing(self) -> None:
        fs = sample_tree()
        cache = FolderCache(fs)

        first, first_error = cache.get_or_populate(Path("/root"))
        calls_after_first = len(fs.list_calls)
        second, second_error = cache.get_or_populate(Path("/root"))

        self.assertIsNone(first_error)
        self.assertIsNone(second_error)
        self.assertEqual(first, second)
        self.assertEqual(len(fs.list_calls), calls_after_first)

    def test_miss_prewarms_whole_subtree(self) -> None:
        fs = sample_tree()
        cache = FolderCache(fs)

        cache.get_or_populate(Path("/root"))

        self.assertIn(Path("/root/sub"), cache)
        self.assertIn(Path("/root/sub/deep"), cache)
        self.assertEqual(len(cache), 3)

        fs.list_calls.clear()
        children, error = cache.get_or_populate(Path("/root/sub/deep"))
        self.assertIsNone(error)
        self.assertEqual(children, (Path("/root/sub/deep/c.md"),))
        self.assertEqual(fs.list_calls, [])

    def test_each_directory_stores_its_own_children(self) -> None:
        cache = FolderCache(sample_tree())
        cache.get_or_populate(Path("/root"))

        sub_children, _ = cache.get_or_populate(Path("/root/sub"))
        self.assertEqual(sub_children, (Path("/root/sub/b.py"), Path("/root/sub/deep")))

    def test_zero_depth_disables_prewarm(self) -> None:
        fs = sample_tree()
        cache = FolderCache(fs, max_depth=0)

        cache.get_or_populate(Path("/root"))

        self.assertEqual(cache.cached_paths(), (Path("/root"),))
        self.assertEqual(fs.list_calls, [Path("/root")])

    def test_depth_limit_stops_prewarm(self) -> None:
        cache = FolderCache(sample_tree(), max_depth=1)

        cache.get_or_populate(Path("/root"))

        self.assertIn(Path("/root/sub"), cache)
        self.assertNotIn(Path("/root/sub/deep"), cache)

    def test_listing_failure_is_reported_and_not_stored(self) -> None:
        fs = sample_tree()
        fs.unlistable.add(Path("/root"))
        cache = FolderCache(fs)

        children, error = cache.get_or_populate(Path("/root"))

        self.assertEqual(children, ())
        self.assertIsInstance(error, PermissionError)
        self.assertEqual(len(cache), 0)

    def test_failed_child_during_prewarm_is_retried_on_visit(self) -> None:
        fs = sample_tree()
        fs.unlistable.add(Path("/root/sub"))
        cache = FolderCache(fs)

        cache.get_or_populate(Path("/root"))
        self.assertNotIn(Path("/root/sub"), cache)

        fs.unlistable.clear()
        children, error = cache.get_or_populate(Path("/root/sub"))
        self.assertIsNone(error)
        self.assertEqual(len(children), 2)

    def test_symlink_cycle_terminates(self) -> None:
        fs = FakeFileSystem(
            {
                "/loop": ["inner"],
                "/loop/inner": ["back", "file.txt"],
            },
            links={"/loop/inner/back": "/loop"},
        )
        cache = FolderCache(fs, max_depth=50)

        children, error = cache.get_or_populate(Path("/loop"))

        self.assertIsNone(error)
        self.assertEqual(children, (Path("/loop/inner"),))
        self.assertIn(Path("/loop/inner"), cache)
        self.assertNotIn(Path("/loop/inner/back"), cache)
        self.assertLessEqual(len(fs.list_calls), 2)

    def test_alias_sibling_does_not_hide_real_directory(self) -> None:
        fs = FakeFileSystem(
            {
                "/root": ["alias", "sub"],
                "/root/sub": ["deep"],
                "/root/sub/deep": ["c.md"],
            },
            links={"/root/alias": "/root/sub"},
        )
        cache = FolderCache(fs)

        cache.get_or_populate(Path("/root"))

        self.assertIn(Path("/root/alias"), cache)
        self.assertIn(Path("/root/sub"), cache)
        self.assertIn(Path("/root/sub/deep"), cache)

        fs.list_calls.clear()
        children, error = cache.get_or_populate(Path("/root/sub"))
        self.assertIsNone(error)
        self.assertEqual(children, (Path("/root/sub/deep"),))
        self.assertEqual(fs.list_calls, [])

    def test_cached_entries_are_never_refreshed(self) -> None:
        fs = sample_tree()
        cache = FolderCache(fs)
        before, _ = cache.get_or_populate(Path("/root"))

        fs.directories[Path("/root")] = ("a.txt", "new.txt", "notes.bin", "sub")
        after, _ = cache.get_or_populate(Path("/root"))

        self.assertEqual(before, after)


if __name__ == "__main__":
    unittest.main()
