"""Tests for the scripted shopkeeper used by headless runs."""
from __future__ import annotations

import random
import unittest

import main
from config import MODE_EXACT
from game import BakerySim, Order, evaluate_tray
from game.autoplay import AutoPlayer, plan_tray


class TestPlanTray(unittest.TestCase):
    def setUp(self):
        self.order = Order(items={"berry": 2, "lemon": 1}, mode=MODE_EXACT)
        self.keys = ["berry", "lemon", "mint", "grape"]

    def test_skilled_plan_is_perfect(self):
        tray = plan_tray(self.order, random.Random(1), 1.0, self.keys)
        self.assertEqual(sorted(tray), ["berry", "berry", "lemon"])

    def test_unskilled_plan_always_slips_up(self):
        rng = random.Random(4)
        for _ in range(50):
            tray = plan_tray(self.order, rng, 0.0, self.keys)
            self.assertFalse(evaluate_tray(self.order, tray).perfect)


class TestAutoPlayer(unittest.TestCase):
    def test_idles_without_order(self):
        sim = BakerySim(seed=1)
        AutoPlayer(sim).step()
        self.assertEqual(sim.state.served, 0)

    def test_waits_before_serving_each_customer(self):
        sim = BakerySim(seed=1)
        sim.start_day()
        player = AutoPlayer(sim, skill=1.0, max_think=2)
        player.step()
        self.assertEqual(sim.state.served, 0)
        for _ in range(3):
            player.step()
        self.assertEqual(sim.state.served, 1)

    def test_skilled_headless_day_is_all_perfect(self):
        sim = main.run_headless(days=1, seed=5, skill=1.0, day_length=60)
        s = sim.summary()
        self.assertGreater(s.served, 0)
        self.assertEqual(s.perfect, s.served)
        self.assertEqual(s.failed, 0)
        self.assertGreater(s.coins, 0)


if __name__ == "__main__":
    unittest.main()
