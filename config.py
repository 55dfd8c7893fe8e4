"""Centralised configuration constants for Candy Bakery."""
from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# File paths
# ---------------------------------------------------------------------------
CANDIES_FILE: Path = Path("data/candies.json")

# ---------------------------------------------------------------------------
# Day / customer timing (seconds)
# ---------------------------------------------------------------------------
DAY_LENGTH_SECONDS: int = 120       # 2 minutes per shop day
PATIENCE_SECONDS: int = 25          # per-customer patience budget
NEXT_CUSTOMER_DELAY: float = 0.8    # cooldown between customers
TICK_INTERVAL: float = 1.0          # both countdowns tick once per second

# ---------------------------------------------------------------------------
# Tray
# ---------------------------------------------------------------------------
TRAY_MAX: int = 12

# ---------------------------------------------------------------------------
# Order generation
# ---------------------------------------------------------------------------
MIN_DISTINCT_CANDIES: int = 2
MAX_DISTINCT_CANDIES: int = 4
MIN_CANDY_COUNT: int = 1
MAX_CANDY_COUNT: int = 3
EXACT_MODE_CHANCE: float = 0.75
MIN_CATALOG_SIZE: int = MAX_DISTINCT_CANDIES

# ---------------------------------------------------------------------------
# Order modes
# ---------------------------------------------------------------------------
MODE_EXACT: str = "exact"
MODE_AT_LEAST: str = "atleast"

# ---------------------------------------------------------------------------
# Reward tiers and scoring
# ---------------------------------------------------------------------------
TIER_PERFECT: str = "perfect"
TIER_OK: str = "ok"
TIER_FAILED: str = "failed"

PERFECT_BASE_COINS: int = 8
PERFECT_PATIENCE_DIVISOR: int = 5   # +1 coin per 5s of patience left
OK_BASE_COINS: int = 4
OK_PATIENCE_DIVISOR: int = 10       # +1 coin per 10s of patience left

# ---------------------------------------------------------------------------
# Session phases
# ---------------------------------------------------------------------------
PHASE_IDLE: str = "idle"
PHASE_AWAITING_ORDER: str = "awaiting_order"
PHASE_ORDER_ACTIVE: str = "order_active"
PHASE_DAY_ENDED: str = "day_ended"

# ---------------------------------------------------------------------------
# Soft-failure reasons reported to the front end
# ---------------------------------------------------------------------------
REASON_TRAY_FULL: str = "tray_full"
REASON_NO_ACTIVE_ORDER: str = "no_active_order"
REASON_UNKNOWN_CANDY: str = "unknown_candy"

# ---------------------------------------------------------------------------
# Event log
# ---------------------------------------------------------------------------
EVENT_LOG_SIZE: int = 12
