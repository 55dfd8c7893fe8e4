"""Player-facing strings shared by the graphical and headless front ends."""
from __future__ import annotations

from typing import Dict, Mapping

from config import MODE_EXACT
from game.entities import Order


def format_clock(seconds: int) -> str:
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


def describe_order(order: Order, candies: Mapping[str, Dict]) -> str:
    """Speech-bubble line, e.g. ``"I want exactly 2 Berry Pops and 1 Lemon Drop."``."""
    parts = []
    for key, count in order.items.items():
        name = str(candies.get(key, {}).get("display_name", key))
        parts.append(f"{count} {name}{'s' if count > 1 else ''}")
    joined = " and ".join(parts) if len(parts) == 2 else ", ".join(parts)
    if order.mode == MODE_EXACT:
        return f"I want exactly {joined}."
    return f"At least {joined}, please!"
