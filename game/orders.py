"""Order generation, tray evaluation and serve scoring.

These are plain functions with no state of their own; :class:`BakerySim`
feeds them its random source, the active order and the tray.
"""
from __future__ import annotations

import random
from collections import Counter
from typing import Iterable, Sequence, Tuple

from config import (
    EXACT_MODE_CHANCE,
    MAX_CANDY_COUNT,
    MAX_DISTINCT_CANDIES,
    MIN_CANDY_COUNT,
    MIN_DISTINCT_CANDIES,
    MODE_AT_LEAST,
    MODE_EXACT,
    OK_BASE_COINS,
    OK_PATIENCE_DIVISOR,
    PERFECT_BASE_COINS,
    PERFECT_PATIENCE_DIVISOR,
    TIER_FAILED,
    TIER_OK,
    TIER_PERFECT,
)
from game.entities import Order, Verdict


def max_distinct_for_day(day: int) -> int:
    """Difficulty ramp: one more distinct candy every two days, capped."""
    return min(MAX_DISTINCT_CANDIES, MIN_DISTINCT_CANDIES + day // 2)


def generate_order(day: int, rng: random.Random, candy_keys: Sequence[str]) -> Order:
    distinct = rng.randint(MIN_DISTINCT_CANDIES, max_distinct_for_day(day))
    chosen = rng.sample(list(candy_keys), distinct)
    items = {key: rng.randint(MIN_CANDY_COUNT, MAX_CANDY_COUNT) for key in chosen}
    mode = MODE_EXACT if rng.random() < EXACT_MODE_CHANCE else MODE_AT_LEAST
    return Order(items=items, mode=mode)


def evaluate_tray(order: Order, tray: Iterable[str]) -> Verdict:
    required = order.items
    actual = Counter(tray)

    perfect = True
    ok = True

    for key, need in required.items():
        have = actual.get(key, 0)
        if order.mode == MODE_EXACT:
            if have != need:
                perfect = False
            if have == 0:
                ok = False
        elif order.mode == MODE_AT_LEAST:
            if have < need:
                perfect = False
                ok = False

    if order.mode == MODE_EXACT:
        # Any candy the customer did not ask for spoils an exact order.
        if any(key not in required for key in actual):
            perfect = False
            ok = False

    return Verdict(perfect=perfect, ok=ok or perfect)


def score_serve(verdict: Verdict, patience: int) -> Tuple[str, int]:
    if verdict.perfect:
        return TIER_PERFECT, PERFECT_BASE_COINS + max(0, patience // PERFECT_PATIENCE_DIVISOR)
    if verdict.ok:
        return TIER_OK, OK_BASE_COINS + max(0, patience // OK_PATIENCE_DIVISOR)
    return TIER_FAILED, 0
