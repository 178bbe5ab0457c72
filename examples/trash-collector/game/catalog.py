"""Asset catalog and round settings for the trash collector."""
from __future__ import annotations

import json
from pathlib import Path

from tick_minigame import ItemCategory, RoundConfig

CATALOG: dict[ItemCategory, list[str]] = {
    ItemCategory.COMMON: ["apple", "fish", "bread"],
    ItemCategory.UNCOMMON: ["can", "bottle", "wrapper"],
    ItemCategory.RARE: ["golden_bell"],
}

ASSET_COLORS: dict[str, tuple[int, int, int]] = {
    "apple": (220, 60, 60),
    "fish": (90, 160, 220),
    "bread": (210, 170, 100),
    "can": (160, 160, 170),
    "bottle": (80, 190, 120),
    "wrapper": (200, 110, 200),
    "golden_bell": (255, 200, 40),
}

LABELS: dict[str, str] = {
    "apple": "Apple",
    "fish": "Fish",
    "bread": "Bread",
    "can": "Can",
    "bottle": "Bottle",
    "wrapper": "Wrapper",
    "golden_bell": "Golden Bell",
}


def load_config(path: str | None) -> RoundConfig:
    """Default round settings, optionally overridden by a JSON file."""
    if path is None:
        return RoundConfig()
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return RoundConfig.from_dict(data)
