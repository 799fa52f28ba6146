"""Qt-free helpers and display data used by the screens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from seedling.core.progress import GROWTH_STAGES, MAX_LEVEL


@dataclass(frozen=True)
class Cosmetic:
    key: str
    label: str
    emoji: str


COSMETICS = (
    Cosmetic("tree_valentines", "Valentine's tree", "💝"),
    Cosmetic("tree_flowers", "Blossom tree", "🌸"),
    Cosmetic("tree_easter", "Easter tree", "🥚"),
    Cosmetic("tree_apples", "Apple tree", "🍎"),
    Cosmetic("tree_halloween", "Halloween tree", "🎃"),
    Cosmetic("tree_christmas", "Christmas tree", "🎄"),
)

PLANT_LABELS = {
    "sprout": "🌱 Sprout",
    "sprout_1": "🌿 Young sprout",
    "sprout_2": "🪴 Sapling",
    "tree": "🌳 Tree",
}

_DIGITS = re.compile(r"[0-9]+")


def plant_label(level: int) -> str:
    """Label for the plant stage shown at ``level`` (clamped to 1..MAX_LEVEL)."""
    level = max(1, min(MAX_LEVEL, level))
    return PLANT_LABELS[GROWTH_STAGES[level - 1]]


def cosmetic_label(index: int) -> str:
    cosmetic = COSMETICS[index % len(COSMETICS)]
    return f"{cosmetic.emoji} {cosmetic.label}"


def show_carousel(is_max_level: bool, fraction: float) -> bool:
    """The cosmetic carousel replaces the plant once the last level is full."""
    return is_max_level and fraction >= 1.0


def parse_item_count(text: str) -> Optional[int]:
    """Parse the donation field. Returns None unless it is a positive whole number."""
    text = (text or "").strip()
    if not _DIGITS.fullmatch(text):
        return None
    count = int(text)
    return count if count > 0 else None


def format_progress(fraction: float) -> str:
    fraction = max(0.0, min(1.0, fraction))
    return f"{round(fraction * 100)}%"
