"""BakerySim: deterministic, headless-compatible candy shop session.

All gameplay constants are imported from ``config``.  The simulation has no
pygame dependency and is safe to import in headless / test contexts.  Time
only moves when :meth:`BakerySim.tick` is called.
"""
from __future__ import annotations

import random
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from candy_catalog import load_candy_catalog
from config import (
    CANDIES_FILE,
    DAY_LENGTH_SECONDS,
    EVENT_LOG_SIZE,
    MIN_CATALOG_SIZE,
    NEXT_CUSTOMER_DELAY,
    PATIENCE_SECONDS,
    PHASE_AWAITING_ORDER,
    PHASE_DAY_ENDED,
    PHASE_IDLE,
    PHASE_ORDER_ACTIVE,
    REASON_NO_ACTIVE_ORDER,
    REASON_TRAY_FULL,
    REASON_UNKNOWN_CANDY,
    TICK_INTERVAL,
    TIER_FAILED,
    TIER_OK,
    TIER_PERFECT,
    TRAY_MAX,
)
from game.entities import DaySummary, Order, ServeResult, SessionState, TrayResult
from game.orders import evaluate_tray, generate_order, score_serve
from game.text import describe_order
from game.timers import Timer, TimerSet
from game.tray import Tray

CANDIES = load_candy_catalog(CANDIES_FILE)

SERVE_MESSAGES: Dict[str, str] = {
    TIER_PERFECT: "Perfect! The customer is delighted",
    TIER_OK: "Pretty good! They seem satisfied",
    TIER_FAILED: "Oops, that's not what they wanted",
}


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


class BakerySim:
    """Tick-based candy shop session.

    Three countdowns share one :class:`TimerSet`: the day clock, the current
    customer's patience, and the cooldown before the next customer walks in.
    Every transition that ends a day or starts a new one cancels all of
    them first, so rounds never overlap.
    """

    def __init__(
        self,
        seed: int = 7,
        *,
        rng: Optional[random.Random] = None,
        candies: Optional[Dict[str, Dict]] = None,
        day_length: int = DAY_LENGTH_SECONDS,
        patience: int = PATIENCE_SECONDS,
        tray_max: int = TRAY_MAX,
    ) -> None:
        if day_length <= 0:
            raise ValueError("day_length must be positive")
        if patience <= 0:
            raise ValueError("patience must be positive")
        self.rng = rng if rng is not None else random.Random(seed)
        self.candies: Dict[str, Dict] = dict(candies if candies is not None else CANDIES)
        if len(self.candies) < MIN_CATALOG_SIZE:
            raise ValueError(f"need at least {MIN_CATALOG_SIZE} candies, got {len(self.candies)}")
        self.day_length = day_length
        self.patience_budget = patience
        self.timers = TimerSet()
        self.tray = Tray(tray_max)
        self._order: Optional[Order] = None
        self.customers: int = 0
        self.phase: str = PHASE_IDLE
        self._state = SessionState(day=1, time_left=day_length, patience=patience)
        self._summary: Optional[DaySummary] = None
        self._day_timer: Optional[Timer] = None
        self._patience_timer: Optional[Timer] = None
        self._spawn_timer: Optional[Timer] = None
        self.event_log: List[str] = []

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return replace(self._state)

    @property
    def day(self) -> int:
        return self._state.day

    @property
    def time_left(self) -> int:
        return self._state.time_left

    @property
    def tray_contents(self) -> Tuple[str, ...]:
        return self.tray.contents

    @property
    def patience_fraction(self) -> float:
        return clamp(self._state.patience / self.patience_budget, 0.0, 1.0)

    @property
    def order(self) -> Optional[Order]:
        """Copy of the live order; editing it does not affect scoring."""
        if self._order is None:
            return None
        return Order(items=dict(self._order.items), mode=self._order.mode)

    @property
    def candy_keys(self) -> List[str]:
        return list(self.candies)

    def order_text(self) -> str:
        if self._order is None:
            return ""
        return describe_order(self._order, self.candies)

    def summary(self) -> DaySummary:
        if self._summary is not None:
            return self._summary
        s = self._state
        return DaySummary(
            day=s.day,
            served=s.served,
            perfect=s.perfect,
            ok=s.ok,
            failed=s.failed,
            timed_out=s.timed_out,
            coins=s.coins,
        )

    def _log_event(self, message: str) -> None:
        self.event_log.append(message)
        self.event_log = self.event_log[-EVENT_LOG_SIZE:]

    @property
    def last_message(self) -> str:
        return self.event_log[-1] if self.event_log else ""

    # ------------------------------------------------------------------
    # Day lifecycle
    # ------------------------------------------------------------------

    def start_day(self, day: Optional[int] = None) -> None:
        self.timers.cancel_all()
        self._day_timer = self._patience_timer = self._spawn_timer = None
        day = self._state.day if day is None else max(1, int(day))
        self._state = SessionState(day=day, time_left=self.day_length, patience=self.patience_budget)
        self._summary = None
        self._order = None
        self.tray.clear()
        self.phase = PHASE_AWAITING_ORDER
        self._log_event(f"Day {day} open")

        self._day_timer = self.timers.every("day", TICK_INTERVAL, self._tick_day)
        self._next_customer()

    def end_day(self) -> DaySummary:
        if self.phase == PHASE_DAY_ENDED:
            return self.summary()
        self.timers.cancel_all()
        self._day_timer = self._patience_timer = self._spawn_timer = None
        self._order = None
        self.tray.clear()
        self.phase = PHASE_DAY_ENDED
        self._summary = self.summary()
        self._log_event(f"Day {self._state.day} closed: {self._state.coins} coins")
        return self._summary

    def next_day(self) -> None:
        self.start_day(self._state.day + 1)

    def restart(self) -> None:
        self.timers.cancel_all()
        self._day_timer = self._patience_timer = self._spawn_timer = None
        self._order = None
        self.tray.clear()
        self._state = SessionState(day=1, time_left=self.day_length, patience=self.patience_budget)
        self._summary = None
        self.phase = PHASE_IDLE

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    def _next_customer(self) -> None:
        self._spawn_timer = None
        self._order = generate_order(self._state.day, self.rng, self.candy_keys)
        self.customers += 1
        self._state.patience = self.patience_budget
        self.tray.clear()
        self.phase = PHASE_ORDER_ACTIVE
        self.timers.cancel(self._patience_timer)
        self._patience_timer = self.timers.every("patience", TICK_INTERVAL, self._tick_patience)

    def _end_current_customer(self) -> None:
        self._order = None
        self.tray.clear()
        self.timers.cancel(self._patience_timer)
        self._patience_timer = None
        self.phase = PHASE_AWAITING_ORDER
        self._spawn_timer = self.timers.once("spawn", NEXT_CUSTOMER_DELAY, self._next_customer)

    def _tick_day(self) -> None:
        self._state.time_left = max(0, self._state.time_left - 1)
        if self._state.time_left <= 0:
            self.end_day()

    def _tick_patience(self) -> None:
        if self.phase != PHASE_ORDER_ACTIVE:
            return
        self._state.patience = max(0, self._state.patience - 1)
        if self._state.patience <= 0:
            self._state.failed += 1
            self._state.timed_out += 1
            self._log_event("Customer left... time's up!")
            self._end_current_customer()

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def add_to_tray(self, key: str) -> TrayResult:
        if self.phase != PHASE_ORDER_ACTIVE:
            return TrayResult(ok=False, reason=REASON_NO_ACTIVE_ORDER)
        if key not in self.candies:
            return TrayResult(ok=False, reason=REASON_UNKNOWN_CANDY)
        if not self.tray.add(key):
            self._log_event("Tray is full!")
            return TrayResult(ok=False, reason=REASON_TRAY_FULL)
        self._log_event("Added to tray.")
        return TrayResult(ok=True)

    def undo_last(self) -> None:
        if self.phase == PHASE_ORDER_ACTIVE:
            self.tray.undo()

    def clear_tray(self) -> None:
        if self.phase == PHASE_ORDER_ACTIVE:
            self.tray.clear()

    def serve(self) -> ServeResult:
        if self.phase != PHASE_ORDER_ACTIVE or self._order is None:
            return ServeResult(ok=False, reason=REASON_NO_ACTIVE_ORDER)
        verdict = evaluate_tray(self._order, self.tray.contents)
        tier, coins = score_serve(verdict, self._state.patience)
        if tier == TIER_PERFECT:
            self._state.perfect += 1
        elif tier == TIER_OK:
            self._state.ok += 1
        else:
            self._state.failed += 1
        self._state.coins += coins
        self._state.served += 1
        self._log_event(SERVE_MESSAGES[tier])
        self._end_current_customer()
        return ServeResult(ok=True, tier=tier, coins_awarded=coins)

    # ------------------------------------------------------------------
    # Main tick
    # ------------------------------------------------------------------

    def tick(self, dt: float) -> None:
        if self.phase in (PHASE_IDLE, PHASE_DAY_ENDED):
            return
        self.timers.advance(dt)

    def on_tick(self, elapsed_seconds: float) -> None:
        self.tick(elapsed_seconds)
