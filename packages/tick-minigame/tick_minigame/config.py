"""Round configuration."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from tick_minigame.types import ConfigError, ItemCategory, SpawnRect

DEFAULT_WEIGHTS: Mapping[ItemCategory, float] = MappingProxyType({
    ItemCategory.COMMON: 6.0,
    ItemCategory.UNCOMMON: 3.0,
    # Low, but the planner guarantees one per round.
    ItemCategory.RARE: 0.6,
})

DEFAULT_BOUNDS = SpawnRect(-8.0, -4.5, 8.0, 4.5)


@dataclass(frozen=True)
class RoundConfig:
    """Immutable settings for one round.

    Attributes:
        target_count: Number of items to spawn and collect.
        weights: Relative spawn weight per category (missing means 0).
        bounds: Spawn rectangle.
        min_separation: Minimum distance between spawned items.
        max_attempts: Placement samples per item before accepting the last one.
        time_limit: Round length in seconds.
        guaranteed: Category that appears exactly once per round.
        fallback: Category used for every other slot when no weight remains.
    """

    target_count: int = 25
    weights: Mapping[ItemCategory, float] = field(default_factory=lambda: dict(DEFAULT_WEIGHTS))
    bounds: SpawnRect = DEFAULT_BOUNDS
    min_separation: float = 0.6
    max_attempts: int = 40
    time_limit: float = 15.0
    guaranteed: ItemCategory = ItemCategory.RARE
    fallback: ItemCategory | None = ItemCategory.COMMON

    def __post_init__(self) -> None:
        # Freeze a private copy so callers can't mutate weights mid-round.
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))

    def __hash__(self) -> int:
        return hash((
            self.target_count,
            frozenset(self.weights.items()),
            self.bounds,
            self.min_separation,
            self.max_attempts,
            self.time_limit,
            self.guaranteed,
            self.fallback,
        ))

    def weight(self, category: ItemCategory) -> float:
        return float(self.weights.get(category, 0.0))

    def filler_weights(self) -> dict[ItemCategory, float]:
        """Weights for the non-guaranteed slots."""
        return {
            cat: self.weight(cat) for cat in ItemCategory if cat is not self.guaranteed
        }

    def validate(self) -> None:
        """Raise ConfigError if a round cannot start from this config."""
        if self.target_count < 0:
            raise ConfigError(f"target_count must be >= 0, got {self.target_count}")
        for cat, w in self.weights.items():
            if not isinstance(cat, ItemCategory):
                raise ConfigError(f"Unknown category {cat!r}")
            if not 0 <= w < math.inf:
                raise ConfigError(f"weight for {cat.value} must be >= 0 and finite, got {w}")
        if not 0 < self.time_limit < math.inf:
            raise ConfigError(f"time_limit must be finite and > 0, got {self.time_limit}")
        if not 0 <= self.min_separation < math.inf:
            raise ConfigError(f"min_separation must be finite and >= 0, got {self.min_separation}")
        if self.max_attempts < 1:
            raise ConfigError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if not self.bounds.area > 0:
            raise ConfigError(f"Spawn bounds have no area: {self.bounds}")
        if self.fallback is not None and self.fallback is self.guaranteed:
            raise ConfigError("fallback category must differ from the guaranteed category")
        if (
            self.target_count > 1
            and self.fallback is None
            and sum(self.filler_weights().values()) <= 0
        ):
            raise ConfigError("All category weights are zero and no fallback is defined")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RoundConfig:
        """Build a config from plain data, e.g. a parsed JSON settings file.

        Categories are given by value (``"common"``), bounds as
        ``[min_x, min_y, max_x, max_y]``. Missing keys keep their defaults.
        """
        kwargs: dict[str, Any] = {}
        for key in ("target_count", "max_attempts"):
            if key in data:
                kwargs[key] = int(data[key])
        for key in ("min_separation", "time_limit"):
            if key in data:
                kwargs[key] = float(data[key])
        if "weights" in data:
            kwargs["weights"] = {
                _category(name): float(w) for name, w in data["weights"].items()
            }
        if "bounds" in data:
            try:
                min_x, min_y, max_x, max_y = (float(v) for v in data["bounds"])
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"bounds must be four numbers, got {data['bounds']!r}") from exc
            kwargs["bounds"] = SpawnRect(min_x, min_y, max_x, max_y)
        if "guaranteed" in data:
            kwargs["guaranteed"] = _category(data["guaranteed"])
        if "fallback" in data:
            fallback = data["fallback"]
            kwargs["fallback"] = None if fallback is None else _category(fallback)
        return cls(**kwargs)


def _category(name: str) -> ItemCategory:
    try:
        return ItemCategory(name)
    except ValueError:
        raise ConfigError(f"Unknown category {name!r}") from None
