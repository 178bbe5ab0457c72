"""Spawn factory boundary: turns planned items into identities and asset tags."""
from __future__ import annotations

import random
from typing import Iterable, Mapping, NamedTuple, Protocol

from tick_minigame.types import AssetTag, ConfigError, ItemCategory, ItemId, Pos2D


class SpawnTicket(NamedTuple):
    identity: ItemId
    asset_tag: AssetTag


class SpawnFactory(Protocol):
    """Creates and releases the outside representation of round items.

    The round manager never builds visuals. It calls ``spawn`` once per planned
    item and ``despawn`` when an item is collected or the round discards it.
    """

    def spawn(
        self, category: ItemCategory, position: Pos2D, rng: random.Random
    ) -> SpawnTicket: ...

    def despawn(self, identity: ItemId) -> None: ...


class CatalogSpawner:
    """Issues sequential integer ids and picks asset tags from per-category lists.

    An empty list for a category falls back to any tag in the catalog. With no
    catalog at all, the tag is the category value itself.
    """

    def __init__(self, catalog: Mapping[ItemCategory, Iterable[AssetTag]] | None = None) -> None:
        self._catalog: dict[ItemCategory, list[AssetTag]] | None = None
        if catalog is not None:
            self._catalog = {cat: list(tags) for cat, tags in catalog.items()}
        self._next_id: int = 0
        self._alive: set[int] = set()

    def pick_tag(self, category: ItemCategory, rng: random.Random) -> AssetTag:
        if self._catalog is None:
            return category.value
        tags = self._catalog.get(category)
        if tags:
            return tags[rng.randrange(len(tags))]
        everything = [tag for cat in ItemCategory for tag in self._catalog.get(cat, ())]
        if not everything:
            raise ConfigError("Asset catalog is empty for every category")
        return everything[rng.randrange(len(everything))]

    def spawn(
        self, category: ItemCategory, position: Pos2D, rng: random.Random
    ) -> SpawnTicket:
        tag = self.pick_tag(category, rng)
        eid = self._next_id
        self._next_id += 1
        self._alive.add(eid)
        return SpawnTicket(eid, tag)

    def despawn(self, identity: ItemId) -> None:
        self._alive.discard(identity)

    def alive(self) -> frozenset[int]:
        return frozenset(self._alive)
