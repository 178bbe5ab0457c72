"""Weighted category planning with one guaranteed slot."""
from __future__ import annotations

import random
from typing import Mapping

from tick_minigame.types import ConfigError, ItemCategory


def weighted_category(
    weights: Mapping[ItemCategory, float],
    rng: random.Random,
    fallback: ItemCategory | None = ItemCategory.COMMON,
) -> ItemCategory:
    """Draw one category with probability proportional to its weight.

    Categories are walked in declaration order, so a fixed seed always maps to
    the same category. Returns *fallback* when no weight is positive.
    """
    ordered = [(cat, max(0.0, float(weights.get(cat, 0.0)))) for cat in ItemCategory]
    total = sum(w for _, w in ordered)
    if total <= 0:
        if fallback is None:
            raise ConfigError("All category weights are zero and no fallback is defined")
        return fallback

    r = rng.random() * total
    last = fallback
    for cat, w in ordered:
        if w <= 0:
            continue
        if r < w:
            return cat
        r -= w
        last = cat
    # Float residue can leave r just above the final weight.
    assert last is not None
    return last


def plan_categories(
    count: int,
    weights: Mapping[ItemCategory, float],
    rng: random.Random,
    guaranteed: ItemCategory = ItemCategory.RARE,
    fallback: ItemCategory | None = ItemCategory.COMMON,
) -> list[ItemCategory]:
    """Return *count* categories containing *guaranteed* exactly once.

    The guaranteed slot index is uniform over ``[0, count)``. Every other slot
    is drawn from *weights* with the guaranteed category excluded.
    """
    if count < 0:
        raise ConfigError(f"count must be >= 0, got {count}")
    if count == 0:
        return []

    filler = {cat: w for cat, w in weights.items() if cat is not guaranteed}
    g = rng.randrange(count)
    plan: list[ItemCategory] = []
    for i in range(count):
        if i == g:
            plan.append(guaranteed)
        else:
            plan.append(weighted_category(filler, rng, fallback))
    return plan
