"""Pointer-to-item resolution and world/screen mapping."""
from __future__ import annotations

import math
from typing import Iterable

from tick_minigame import PlannedItem, Pos2D, SpawnRect

from ui.constants import (
    BOB_AMPLITUDE, BOB_SPEED, ITEM_RADIUS, PIXELS_PER_UNIT, PLAY_H, PLAY_W, PLAY_X,
    PLAY_Y, TARGET_SCALE,
)


def world_to_screen(pos: Pos2D, bounds: SpawnRect) -> tuple[int, int]:
    scale = min(PLAY_W / bounds.width, PLAY_H / bounds.height)
    # World y grows upward, screen y grows downward.
    sx = PLAY_X + (pos.x - bounds.min_x) * scale
    sy = PLAY_Y + (bounds.max_y - pos.y) * scale
    return int(sx), int(sy)


def bob_offset(t: float) -> int:
    """Vertical bob in pixels at animation time *t*, shared by drawing and picking."""
    return int(math.sin(t * BOB_SPEED) * BOB_AMPLITUDE * PIXELS_PER_UNIT)


def pick_item(
    items: Iterable[PlannedItem],
    point: tuple[int, int],
    bounds: SpawnRect,
    target: object | None,
    bob: int = 0,
) -> object | None:
    """Return the identity of the item under *point*, or None.

    Hit circles match what is drawn: shifted up by *bob*, and the current
    target scaled up. The target is drawn on top, so it wins overlapping hits.
    """
    hit = None
    px, py = point
    target_radius = int(ITEM_RADIUS * TARGET_SCALE)
    for item in items:
        sx, sy = world_to_screen(item.position, bounds)
        radius = target_radius if item.identity == target else ITEM_RADIUS
        if (sx - px) ** 2 + (sy - bob - py) ** 2 > radius * radius:
            continue
        if item.identity == target:
            return item.identity
        if hit is None:
            hit = item.identity
    return hit
