"""Core dataclasses for the Candy Bakery simulation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from config import MODE_EXACT


@dataclass
class Order:
    """A customer's request: candy key → required count, plus a matching mode.

    ``mode`` is ``"exact"`` (counts must match and extras are forbidden) or
    ``"atleast"`` (counts are thresholds and extras are ignored).
    """

    items: Dict[str, int] = field(default_factory=dict)
    mode: str = MODE_EXACT


@dataclass(frozen=True)
class Verdict:
    """Result of comparing a tray against an order."""

    perfect: bool
    ok: bool


@dataclass(frozen=True)
class TrayResult:
    ok: bool
    reason: str = ""


@dataclass(frozen=True)
class ServeResult:
    ok: bool
    tier: Optional[str] = None
    coins_awarded: int = 0
    reason: str = ""


@dataclass
class SessionState:
    """Per-day counters and timers; a fresh instance is created every day.

    Serves bump ``served`` and one of the tier counters.  Timeouts bump
    ``failed`` and ``timed_out`` but not ``served``, so
    ``perfect + ok + failed == served + timed_out`` always holds.
    """

    day: int = 1
    time_left: int = 0
    coins: int = 0
    served: int = 0
    perfect: int = 0
    ok: int = 0
    failed: int = 0
    timed_out: int = 0
    patience: int = 0


@dataclass(frozen=True)
class DaySummary:
    day: int
    served: int
    perfect: int
    ok: int
    failed: int
    timed_out: int
    coins: int
