from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

from config import CANDIES_FILE, MIN_CATALOG_SIZE

CANDY_KEY_RE = re.compile(r"^[a-z][a-z0-9_]*$")
DEFAULT_COLOR = (200, 200, 200)


@dataclass(frozen=True)
class CandyDefinition:
    key: str
    display_name: str
    emoji: str = ""
    color: tuple[int, int, int] = DEFAULT_COLOR
    order: int = 0

    def to_runtime_dict(self) -> Dict[str, str | List[int]]:
        return {
            "display_name": self.display_name,
            "emoji": self.emoji,
            "color": list(self.color),
        }


DEFAULT_CANDY_DEFINITIONS: Dict[str, CandyDefinition] = {
    "berry": CandyDefinition(key="berry", display_name="Berry Pop", emoji="\U0001F353", color=(232, 72, 96), order=0),
    "lemon": CandyDefinition(key="lemon", display_name="Lemon Drop", emoji="\U0001F34B", color=(246, 218, 76), order=1),
    "lime": CandyDefinition(key="lime", display_name="Lime Slice", emoji="\U0001F7E2", color=(120, 204, 86), order=2),
    "grape": CandyDefinition(key="grape", display_name="Grape Gem", emoji="\U0001F347", color=(146, 84, 196), order=3),
    "blue": CandyDefinition(key="blue", display_name="Blueberry", emoji="\U0001F535", color=(72, 124, 230), order=4),
    "choco": CandyDefinition(key="choco", display_name="Choco Bite", emoji="\U0001F36B", color=(122, 78, 52), order=5),
    "vanilla": CandyDefinition(key="vanilla", display_name="Vanilla Fudge", emoji="\U0001F9C8", color=(244, 232, 196), order=6),
    "cola": CandyDefinition(key="cola", display_name="Cola Chew", emoji="\U0001F964", color=(150, 62, 40), order=7),
    "gum": CandyDefinition(key="gum", display_name="Bubble Gum", emoji="\U0001F36C", color=(244, 146, 206), order=8),
    "mint": CandyDefinition(key="mint", display_name="Mint Leaf", emoji="\U0001F33F", color=(116, 226, 184), order=9),
}


def _is_valid_candy_key(value: Any) -> bool:
    return isinstance(value, str) and bool(CANDY_KEY_RE.fullmatch(value))


def _coerce_color(value: Any) -> tuple[int, int, int] | None:
    if not isinstance(value, list) or len(value) != 3:
        return None
    channels: List[int] = []
    for channel in value:
        if isinstance(channel, bool) or not isinstance(channel, int):
            return None
        if not 0 <= channel <= 255:
            return None
        channels.append(channel)
    return (channels[0], channels[1], channels[2])


def _parse_candy_entry(key: str, entry: Dict[str, Any], order: int) -> CandyDefinition | None:
    if not _is_valid_candy_key(key):
        return None

    display_name = entry.get("display_name")
    emoji = entry.get("emoji", "")
    color = entry.get("color", list(DEFAULT_COLOR))

    if not isinstance(display_name, str) or not display_name.strip():
        return None
    if not isinstance(emoji, str):
        return None
    parsed_color = _coerce_color(color)
    if parsed_color is None:
        return None

    return CandyDefinition(
        key=key,
        display_name=display_name.strip(),
        emoji=emoji.strip(),
        color=parsed_color,
        order=order,
    )


def _ordered_runtime_catalog(candies: Iterable[CandyDefinition]) -> Dict[str, Dict[str, str | List[int]]]:
    # Bin order (and the 1-9/0 keyboard shortcuts) follows file order.
    ordered = sorted(candies, key=lambda candy: candy.order)
    return {candy.key: candy.to_runtime_dict() for candy in ordered}


def load_candy_catalog(path: Path = CANDIES_FILE) -> Dict[str, Dict[str, str | List[int]]]:
    if not path.exists():
        return _ordered_runtime_catalog(DEFAULT_CANDY_DEFINITIONS.values())

    try:
        raw = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return _ordered_runtime_catalog(DEFAULT_CANDY_DEFINITIONS.values())

    if not isinstance(raw, dict):
        return _ordered_runtime_catalog(DEFAULT_CANDY_DEFINITIONS.values())

    candies: Dict[str, CandyDefinition] = {}
    for position, (key, entry) in enumerate(raw.items()):
        if not isinstance(entry, dict):
            continue
        candy = _parse_candy_entry(key, entry, position)
        if candy is None:
            continue
        candies[key] = candy

    # Orders need up to four distinct kinds; a smaller catalog cannot be played.
    if len(candies) < MIN_CATALOG_SIZE:
        return _ordered_runtime_catalog(DEFAULT_CANDY_DEFINITIONS.values())

    return _ordered_runtime_catalog(candies.values())
