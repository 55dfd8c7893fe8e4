from __future__ import annotations

import unittest

from config import TRAY_MAX
from game import Tray


class TestTray(unittest.TestCase):
    def test_defaults(self):
        tray = Tray()
        self.assertEqual(tray.capacity, TRAY_MAX)
        self.assertEqual(tray.contents, ())
        self.assertEqual(len(tray), 0)

    def test_add_keeps_insertion_order(self):
        tray = Tray()
        for key in ("berry", "lemon", "berry"):
            self.assertTrue(tray.add(key))
        self.assertEqual(tray.contents, ("berry", "lemon", "berry"))

    def test_add_beyond_capacity_is_rejected(self):
        tray = Tray(capacity=3)
        for _ in range(3):
            tray.add("mint")
        self.assertTrue(tray.is_full)
        for _ in range(5):
            self.assertFalse(tray.add("cola"))
        self.assertEqual(tray.contents, ("mint", "mint", "mint"))

    def test_undo_removes_last(self):
        tray = Tray()
        tray.add("berry")
        tray.add("lemon")
        tray.undo()
        self.assertEqual(tray.contents, ("berry",))

    def test_undo_on_empty_is_noop(self):
        tray = Tray()
        tray.undo()
        tray.undo()
        self.assertEqual(len(tray), 0)

    def test_clear(self):
        tray = Tray()
        tray.add("berry")
        tray.clear()
        self.assertEqual(tray.contents, ())

    def test_contents_is_a_snapshot(self):
        tray = Tray()
        tray.add("berry")
        snapshot = tray.contents
        tray.add("lemon")
        self.assertEqual(snapshot, ("berry",))

    def test_invalid_capacity(self):
        with self.assertRaises(ValueError):
            Tray(capacity=0)


if __name__ == "__main__":
    unittest.main()
