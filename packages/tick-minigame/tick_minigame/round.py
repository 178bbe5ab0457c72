"""RoundManager - timed collection round lifecycle."""
from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass, field
from typing import Callable

from tick_minigame.config import RoundConfig
from tick_minigame.placer import place_items
from tick_minigame.planner import plan_categories
from tick_minigame.scoring import ScoreTally
from tick_minigame.spawning import CatalogSpawner, SpawnFactory
from tick_minigame.types import (
    ConfigError,
    ItemId,
    OrderedSummary,
    PlannedItem,
    RoundStatus,
    SelectOutcome,
    UsageError,
)

logger = logging.getLogger(__name__)

TargetHook = Callable[["RoundManager", "ItemId | None", "ItemId | None"], None]
CollectHook = Callable[["RoundManager", PlannedItem], None]
EndHook = Callable[["RoundManager", RoundStatus], None]


@dataclass
class RoundState:
    """Mutable state of the current round. Owned by RoundManager."""

    status: RoundStatus = RoundStatus.IDLE
    elapsed: float = 0.0
    remaining: float = 0.0
    collected: int = 0
    target_count: int = 0
    live: list[PlannedItem] = field(default_factory=list)
    current_target: ItemId | None = None
    tally: ScoreTally = field(default_factory=ScoreTally)


class RoundManager:
    """Runs one collection round at a time.

    Driven from outside: ``start_round`` begins a round, ``tick`` advances the
    countdown and ``select`` reports that an item was picked. Only the current
    target can be collected; targets advance in spawn order.

    With ``strict=True`` lifecycle violations (ticking or selecting outside a
    running round) raise UsageError. Otherwise they are logged and ignored.
    """

    def __init__(
        self,
        spawner: SpawnFactory | None = None,
        seed: int | None = None,
        strict: bool = False,
    ) -> None:
        self._spawner: SpawnFactory = spawner if spawner is not None else CatalogSpawner()
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._strict = strict
        self._state = RoundState()
        self._config: RoundConfig | None = None
        self._target_hooks: list[TargetHook] = []
        self._collect_hooks: list[CollectHook] = []
        self._end_hooks: list[EndHook] = []

    # -- read access ---------------------------------------------------

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def config(self) -> RoundConfig | None:
        return self._config

    @property
    def status(self) -> RoundStatus:
        return self._state.status

    @property
    def elapsed(self) -> float:
        return self._state.elapsed

    @property
    def remaining(self) -> float:
        return self._state.remaining

    @property
    def collected(self) -> int:
        return self._state.collected

    @property
    def target_count(self) -> int:
        return self._state.target_count

    @property
    def current_target(self) -> ItemId | None:
        return self._state.current_target

    @property
    def live_items(self) -> tuple[PlannedItem, ...]:
        return tuple(self._state.live)

    def summarize(self) -> OrderedSummary:
        return self._state.tally.summarize()

    # -- hooks ---------------------------------------------------------

    def on_target_changed(self, hook: TargetHook) -> None:
        self._target_hooks.append(hook)

    def on_collected(self, hook: CollectHook) -> None:
        self._collect_hooks.append(hook)

    def on_end(self, hook: EndHook) -> None:
        self._end_hooks.append(hook)

    # -- lifecycle -----------------------------------------------------

    def start_round(self, config: RoundConfig) -> None:
        """Discard any previous round and start a new one.

        Raises ConfigError if *config* is unusable; the manager is then Idle
        with no items.
        """
        self._release_live()
        self._state = RoundState()
        self._config = None

        try:
            config.validate()
            items = self._materialize(config)
        except ConfigError:
            logger.warning("round failed to start", exc_info=True)
            raise

        state = self._state
        state.status = RoundStatus.RUNNING
        state.remaining = float(config.time_limit)
        state.target_count = config.target_count
        state.live = items
        self._config = config
        logger.info(
            "round started: %d items, %.1fs limit, seed=%d",
            config.target_count, config.time_limit, self._seed,
        )

        if config.target_count == 0:
            self._finish(RoundStatus.WON)
        elif not items:
            self._finish(RoundStatus.LOST)
        else:
            self._set_target(items[0].identity)

    def tick(self, dt: float) -> RoundStatus:
        """Advance the countdown by *dt* seconds. Returns the resulting status."""
        if not dt >= 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        state = self._state
        if state.status is not RoundStatus.RUNNING:
            self._misuse(f"tick() while {state.status.value}")
            return state.status

        state.elapsed += dt
        state.remaining -= dt
        if state.remaining <= 0:
            # Never report more time than the round had.
            state.elapsed = self._config.time_limit
            state.remaining = 0.0
            self._finish(RoundStatus.LOST)
        return state.status

    def select(self, identity: ItemId) -> SelectOutcome:
        """Report that *identity* was picked by the player."""
        state = self._state
        if state.status is not RoundStatus.RUNNING:
            self._misuse(f"select({identity!r}) while {state.status.value}")
            if state.status is RoundStatus.WON:
                return SelectOutcome.WON
            if state.status is RoundStatus.LOST:
                return SelectOutcome.LOST
            return SelectOutcome.IGNORED

        if identity != state.current_target:
            logger.debug("ignored selection of non-target %r", identity)
            return SelectOutcome.IGNORED
        index = self._index_of(identity)
        if index is None:
            logger.debug("ignored selection of dead item %r", identity)
            return SelectOutcome.IGNORED

        item = state.live.pop(index)
        item.alive = False
        state.collected += 1
        state.tally.record(item.asset_tag)
        self._spawner.despawn(item.identity)

        won = state.collected >= state.target_count or not state.live
        if won:
            self._resolve(RoundStatus.WON)
        else:
            # live is kept in spawn order, so the head is the next target.
            self._set_target(state.live[0].identity)

        # Collect hooks see the settled round.
        for hook in self._collect_hooks:
            hook(self, item)
        if won:
            self._notify_end(RoundStatus.WON)
            return SelectOutcome.WON
        return SelectOutcome.COLLECTED

    # -- internals -----------------------------------------------------

    def _materialize(self, config: RoundConfig) -> list[PlannedItem]:
        plan = plan_categories(
            config.target_count,
            config.weights,
            self._rng,
            guaranteed=config.guaranteed,
            fallback=config.fallback,
        )
        placements = place_items(
            len(plan),
            config.bounds,
            config.min_separation,
            config.max_attempts,
            self._rng,
        )
        items: list[PlannedItem] = []
        try:
            for category, placement in zip(plan, placements):
                ticket = self._spawner.spawn(category, placement.position, self._rng)
                items.append(
                    PlannedItem(
                        category=category,
                        position=placement.position,
                        identity=ticket.identity,
                        asset_tag=ticket.asset_tag,
                    )
                )
        except ConfigError:
            for item in items:
                self._spawner.despawn(item.identity)
            raise
        return items

    def _index_of(self, identity: ItemId) -> int | None:
        for i, item in enumerate(self._state.live):
            if item.identity == identity and item.alive:
                return i
        return None

    def _set_target(self, identity: ItemId | None) -> None:
        old = self._state.current_target
        self._state.current_target = identity
        if old != identity:
            for hook in self._target_hooks:
                hook(self, old, identity)

    def _release_live(self) -> None:
        for item in self._state.live:
            item.alive = False
            self._spawner.despawn(item.identity)
        self._state.live.clear()

    def _finish(self, status: RoundStatus) -> None:
        self._resolve(status)
        self._notify_end(status)

    def _resolve(self, status: RoundStatus) -> None:
        state = self._state
        state.status = status
        self._release_live()
        state.tally.freeze()
        logger.info(
            "round %s: collected %d/%d after %.2fs",
            status.value, state.collected, state.target_count, state.elapsed,
        )
        self._set_target(None)

    def _notify_end(self, status: RoundStatus) -> None:
        for hook in self._end_hooks:
            hook(self, status)

    def _misuse(self, message: str) -> None:
        if self._strict:
            raise UsageError(message)
        logger.warning("ignored %s", message)
