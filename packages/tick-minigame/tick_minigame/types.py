"""Shared types and errors for the minigame round engine."""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Hashable, NamedTuple

ItemId = Hashable
AssetTag = Hashable


class ItemCategory(enum.Enum):
    """Closed set of item categories. Declaration order is the sampling order."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"


class RoundStatus(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    WON = "won"
    LOST = "lost"

    @property
    def terminal(self) -> bool:
        return self in (RoundStatus.WON, RoundStatus.LOST)


class SelectOutcome(enum.Enum):
    IGNORED = "ignored"
    COLLECTED = "collected"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True, slots=True)
class Pos2D:
    x: float
    y: float

    def dist_sq(self, other: Pos2D) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


@dataclass(frozen=True, slots=True)
class SpawnRect:
    """Axis-aligned spawn area given by its min and max corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        """Positive only for a finite rectangle with max corners above min corners."""
        corners = (self.min_x, self.min_y, self.max_x, self.max_y)
        if not all(math.isfinite(c) for c in corners):
            return 0.0
        if not (self.width > 0 and self.height > 0):
            return 0.0
        return self.width * self.height

    def contains(self, pos: Pos2D) -> bool:
        return self.min_x <= pos.x <= self.max_x and self.min_y <= pos.y <= self.max_y


@dataclass
class PlannedItem:
    """One item of a round.

    Attributes:
        category: Assigned by the planner before placement.
        position: Assigned by the placer.
        identity: Opaque handle issued by the spawn factory.
        asset_tag: Opaque grouping key for the score summary.
        alive: False once collected or released.
    """

    category: ItemCategory
    position: Pos2D
    identity: ItemId
    asset_tag: AssetTag
    alive: bool = True


class SummaryRow(NamedTuple):
    tag: AssetTag
    count: int


OrderedSummary = tuple[SummaryRow, ...]


class ConfigError(ValueError):
    """Raised when a round cannot start from the given configuration."""


class UsageError(RuntimeError):
    """Raised on calls that violate the round lifecycle contract."""
