"""tick-minigame - Timed item-collection rounds for tick-driven games."""
from __future__ import annotations

import logging

from tick_minigame.clock import FixedStep
from tick_minigame.config import DEFAULT_WEIGHTS, RoundConfig
from tick_minigame.driver import RoundDriver
from tick_minigame.placer import Placement, place_items
from tick_minigame.planner import plan_categories, weighted_category
from tick_minigame.round import RoundManager, RoundState
from tick_minigame.scoring import ScoreTally
from tick_minigame.spawning import CatalogSpawner, SpawnFactory, SpawnTicket
from tick_minigame.types import (
    ConfigError,
    ItemCategory,
    OrderedSummary,
    PlannedItem,
    Pos2D,
    RoundStatus,
    SelectOutcome,
    SpawnRect,
    SummaryRow,
    UsageError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "RoundManager",
    "RoundState",
    "RoundConfig",
    "RoundDriver",
    "FixedStep",
    "DEFAULT_WEIGHTS",
    "plan_categories",
    "weighted_category",
    "place_items",
    "Placement",
    "ScoreTally",
    "SpawnFactory",
    "SpawnTicket",
    "CatalogSpawner",
    "ItemCategory",
    "RoundStatus",
    "SelectOutcome",
    "PlannedItem",
    "Pos2D",
    "SpawnRect",
    "SummaryRow",
    "OrderedSummary",
    "ConfigError",
    "UsageError",
]
