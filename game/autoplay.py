"""Scripted shopkeeper used by ``main.py --headless`` runs."""
from __future__ import annotations

import random
from typing import List, Sequence

from game.entities import Order
from game.simulation import BakerySim


def plan_tray(order: Order, rng: random.Random, skill: float, candy_keys: Sequence[str]) -> List[str]:
    """Build a tray for ``order``; with probability ``1 - skill`` slip up once."""
    tray = [key for key, count in order.items.items() for _ in range(count)]
    if rng.random() < skill:
        return tray
    if rng.random() < 0.5 and tray:
        tray.remove(rng.choice(tray))
    else:
        tray.append(rng.choice(list(candy_keys)))
    return tray


class AutoPlayer:
    """Waits a few seconds per customer, then fills the tray and serves."""

    def __init__(self, sim: BakerySim, *, skill: float = 0.8, seed: int = 11, max_think: int = 12) -> None:
        self.sim = sim
        self.skill = skill
        self.rng = random.Random(seed)
        self.max_think = max_think
        self._customer = 0
        self._wait = 0

    def step(self) -> None:
        order = self.sim.order
        if order is None:
            return
        if self.sim.customers != self._customer:
            self._customer = self.sim.customers
            self._wait = self.rng.randint(2, self.max_think)
        if self._wait > 0:
            self._wait -= 1
            return
        for key in plan_tray(order, self.rng, self.skill, self.sim.candy_keys):
            self.sim.add_to_tray(key)
        self.sim.serve()
