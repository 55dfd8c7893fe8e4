"""Virtual-clock timers driving the shop's countdowns.

Nothing here reads the wall clock: :meth:`TimerSet.advance` moves virtual
time forward and fires every timer that falls due, in due-time order (ties
in creation order).  A front end advances it with its frame delta, tests
advance it by whole seconds.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

# Tolerance for accumulated float error from fractional frame deltas.
EPSILON = 1e-9


@dataclass
class Timer:
    name: str
    due: float
    interval: float
    callback: Callable[[], None]
    repeat: bool = False
    seq: int = 0
    active: bool = True


class TimerSet:
    def __init__(self) -> None:
        self.now: float = 0.0
        self._timers: List[Timer] = []
        self._seq = 0

    def __len__(self) -> int:
        return len(self._timers)

    def names(self) -> List[str]:
        return [timer.name for timer in self._timers]

    def every(self, name: str, interval: float, callback: Callable[[], None]) -> Timer:
        """Fire ``callback`` every ``interval`` seconds, first after one interval."""
        return self._add(name, interval, callback, repeat=True)

    def once(self, name: str, delay: float, callback: Callable[[], None]) -> Timer:
        return self._add(name, delay, callback, repeat=False)

    def _add(self, name: str, interval: float, callback: Callable[[], None], *, repeat: bool) -> Timer:
        if interval <= 0:
            raise ValueError(f"timer {name!r} needs a positive interval")
        self._seq += 1
        timer = Timer(
            name=name,
            due=self.now + interval,
            interval=interval,
            callback=callback,
            repeat=repeat,
            seq=self._seq,
        )
        self._timers.append(timer)
        return timer

    def cancel(self, timer: Optional[Timer]) -> None:
        if timer is None:
            return
        timer.active = False
        self._timers = [t for t in self._timers if t is not timer]

    def cancel_all(self) -> None:
        for timer in self._timers:
            timer.active = False
        self._timers = []

    def _next_due(self, until: float) -> Optional[Timer]:
        due = [t for t in self._timers if t.active and t.due <= until + EPSILON]
        if not due:
            return None
        return min(due, key=lambda t: (t.due, t.seq))

    def advance(self, dt: float) -> None:
        target = self.now + max(0.0, dt)
        while True:
            timer = self._next_due(target)
            if timer is None:
                break
            self.now = max(self.now, timer.due)
            if timer.repeat:
                timer.due += timer.interval
            else:
                self.cancel(timer)
            # Callbacks may cancel or schedule timers, including this one.
            timer.callback()
        self.now = target
