"""Item rendering and target highlight."""
from __future__ import annotations

import pygame

from tick_minigame import PlannedItem, SpawnRect

from game.catalog import ASSET_COLORS
from game.picking import bob_offset, world_to_screen
from ui.constants import ITEM_RADIUS, NORMAL_TINT, TARGET_COLOR, TARGET_SCALE


def draw_items(
    surface: pygame.Surface,
    items: tuple[PlannedItem, ...],
    bounds: SpawnRect,
    target: object | None,
    t: float,
) -> None:
    """Draw live items; the current target last, scaled up and outlined."""
    bob = bob_offset(t)
    highlighted = None
    for item in items:
        if item.identity == target:
            highlighted = item
            continue
        _draw_one(surface, item, bounds, bob, ITEM_RADIUS, NORMAL_TINT)
    if highlighted is not None:
        radius = int(ITEM_RADIUS * TARGET_SCALE)
        _draw_one(surface, highlighted, bounds, bob, radius, TARGET_COLOR)


def _draw_one(
    surface: pygame.Surface,
    item: PlannedItem,
    bounds: SpawnRect,
    bob: int,
    radius: int,
    outline: tuple[int, int, int],
) -> None:
    sx, sy = world_to_screen(item.position, bounds)
    color = ASSET_COLORS.get(str(item.asset_tag), (200, 200, 200))
    pygame.draw.circle(surface, color, (sx, sy - bob), radius)
    pygame.draw.circle(surface, outline, (sx, sy - bob), radius, 2)
