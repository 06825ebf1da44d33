"""Tests for directory history semantics.

Confirms back/forward bounds, forward truncation on new navigation, and
that history values are never mutated in place.
"""

from __future__ import annotations

import unittest
from pathlib import Path

from pagedir.history import NavigationHistory

A = Path("/a")
B = Path("/b")
C = Path("/c")


class NavigationHistoryTests(unittest.TestCase):
    def test_start_holds_only_startup_directory(self) -> None:
        history = NavigationHistory.start(A)
        self.assertEqual(history.entries, (A,))
        self.assertEqual(history.cursor, 0)
        self.assertEqual(history.current(), A)

    def test_back_and_forward_round_trip(self) -> None:
        history = NavigationHistory.start(C).go_to(A).go_to(B)

        back, moved_back = history.back()
        self.assertTrue(moved_back)
        self.assertEqual(back.current(), A)

        forward, moved_forward = back.forward()
        self.assertTrue(moved_forward)
        self.assertEqual(forward.current(), B)

    def test_back_at_start_is_noop(self) -> None:
        history = NavigationHistory.start(A)
        same, moved = history.back()
        self.assertFalse(moved)
        self.assertIs(same, history)

    def test_forward_at_end_is_noop(self) -> None:
        history = NavigationHistory.start(A).go_to(B)
        same, moved = history.forward()
        self.assertFalse(moved)
        self.assertIs(same, history)

    def test_go_to_after_back_discards_exactly_forward_suffix(self) -> None:
        history = NavigationHistory.start(A).go_to(B).go_to(C)
        history, _ = history.back()
        history, _ = history.back()

        branched = history.go_to(C)

        self.assertEqual(branched.entries, (A, C))
        self.assertEqual(branched.cursor, 1)
        self.assertFalse(branched.can_go_forward)

    def test_go_to_without_forward_history_only_appends(self) -> None:
        history = NavigationHistory.start(A).go_to(B)
        self.assertEqual(history.entries, (A, B))
        self.assertEqual(history.cursor, 1)

    def test_go_to_same_directory_still_appends(self) -> None:
        history = NavigationHistory.start(A).go_to(A)
        self.assertEqual(history.entries, (A, A))

    def test_operations_leave_original_untouched(self) -> None:
        original = NavigationHistory.start(A).go_to(B)
        original.back()
        original.go_to(C)
        self.assertEqual(original.entries, (A, B))
        self.assertEqual(original.cursor, 1)

    def test_invalid_cursor_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            NavigationHistory(entries=(A,), cursor=1)
        with self.assertRaises(ValueError):
            NavigationHistory(entries=())


if __name__ == "__main__":
    unittest.main()
