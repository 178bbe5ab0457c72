"""Best-effort spatial placement by bounded rejection sampling."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable

from tick_minigame.types import ConfigError, Pos2D, SpawnRect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """Accepted position for one item.

    ``relaxed`` is True when every sample was too close to an earlier item and
    the last one was kept anyway.
    """

    position: Pos2D
    attempts: int
    relaxed: bool = False


def too_close(pos: Pos2D, placed: Iterable[Pos2D], min_separation: float) -> bool:
    sq = min_separation * min_separation
    for other in placed:
        if pos.dist_sq(other) < sq:
            return True
    return False


def place_items(
    count: int,
    bounds: SpawnRect,
    min_separation: float,
    max_attempts: int,
    rng: random.Random,
) -> list[Placement]:
    """Place *count* items inside *bounds*, at most *max_attempts* samples each.

    The first sample at least *min_separation* away from every accepted
    position wins. If none qualifies, the last sample is accepted, so
    placement always finishes in ``count * max_attempts`` samples.
    """
    if not bounds.area > 0:
        raise ConfigError(f"Spawn bounds have no area: {bounds}")
    if max_attempts < 1:
        raise ConfigError(f"max_attempts must be >= 1, got {max_attempts}")

    accepted: list[Pos2D] = []
    result: list[Placement] = []
    for _ in range(count):
        attempts = 0
        while True:
            pos = Pos2D(
                rng.uniform(bounds.min_x, bounds.max_x),
                rng.uniform(bounds.min_y, bounds.max_y),
            )
            attempts += 1
            clear = not too_close(pos, accepted, min_separation)
            if clear or attempts >= max_attempts:
                break
        accepted.append(pos)
        result.append(Placement(pos, attempts, relaxed=not clear))

    relaxed = sum(1 for p in result if p.relaxed)
    if relaxed:
        logger.debug(
            "placed %d items, %d closer than %.3f after %d attempts",
            count, relaxed, min_separation, max_attempts,
        )
    return result
