"""Tests for the demo's pointer-to-item hit test."""
from __future__ import annotations

import math

from tick_minigame import ItemCategory, PlannedItem, Pos2D, SpawnRect

from game.picking import bob_offset, pick_item, world_to_screen
from ui.constants import ITEM_RADIUS, PLAY_H, PLAY_W, PLAY_X, PLAY_Y, TARGET_SCALE

BOUNDS = SpawnRect(-8.0, -4.5, 8.0, 4.5)


def make_item(identity: int, x: float = 0.0, y: float = 0.0) -> PlannedItem:
    return PlannedItem(ItemCategory.COMMON, Pos2D(x, y), identity, "common")


class TestWorldToScreen:
    def test_center_and_y_flip(self) -> None:
        cx, cy = world_to_screen(Pos2D(0.0, 0.0), BOUNDS)
        _, top = world_to_screen(Pos2D(0.0, 4.5), BOUNDS)
        assert top < cy
        assert (cx, cy) == (PLAY_X + PLAY_W // 2, PLAY_Y + PLAY_H // 2)


class TestBobOffset:
    def test_rest_and_peak(self) -> None:
        assert bob_offset(0.0) == 0
        peak = bob_offset(math.pi / 2 / 2.2)
        assert 0 < peak <= ITEM_RADIUS


class TestPickItem:
    def test_direct_hit(self) -> None:
        item = make_item(1)
        point = world_to_screen(item.position, BOUNDS)
        assert pick_item([item], point, BOUNDS, target=None) == 1

    def test_miss(self) -> None:
        item = make_item(1)
        sx, sy = world_to_screen(item.position, BOUNDS)
        assert pick_item([item], (sx + ITEM_RADIUS + 1, sy), BOUNDS, target=None) is None

    def test_target_uses_scaled_radius(self) -> None:
        item = make_item(1)
        sx, sy = world_to_screen(item.position, BOUNDS)
        radius = int(ITEM_RADIUS * TARGET_SCALE)
        assert radius > ITEM_RADIUS
        point = (sx + radius, sy)
        assert pick_item([item], point, BOUNDS, target=1) == 1
        assert pick_item([item], point, BOUNDS, target=None) is None

    def test_follows_bob(self) -> None:
        item = make_item(1)
        sx, sy = world_to_screen(item.position, BOUNDS)
        bob = 5
        # Just above the drawn circle's top edge, which sits bob pixels higher.
        above = (sx, sy - bob - ITEM_RADIUS)
        below = (sx, sy + ITEM_RADIUS)
        assert pick_item([item], above, BOUNDS, target=None, bob=bob) == 1
        assert pick_item([item], below, BOUNDS, target=None, bob=bob) is None
        assert pick_item([item], below, BOUNDS, target=None) == 1

    def test_target_wins_overlap(self) -> None:
        a = make_item(1)
        b = make_item(2, x=0.1)
        point = world_to_screen(a.position, BOUNDS)
        assert pick_item([a, b], point, BOUNDS, target=2) == 2
        assert pick_item([a, b], point, BOUNDS, target=None) == 1
