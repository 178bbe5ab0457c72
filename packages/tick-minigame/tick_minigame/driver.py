"""RoundDriver - feeds frame time and selection events into a RoundManager."""
from __future__ import annotations

from collections import deque

from tick_minigame.clock import FixedStep
from tick_minigame.config import RoundConfig
from tick_minigame.round import RoundManager
from tick_minigame.types import ItemId, RoundStatus, SelectOutcome


class RoundDriver:
    """Boundary between an input/frame loop and the round core.

    Selections are queued as they arrive and applied at the start of the next
    fixed step, before the timer is ticked, so a click made in the last frame
    of a round still counts.
    """

    def __init__(self, manager: RoundManager, step: float = 1.0 / 20) -> None:
        self._manager = manager
        self._clock = FixedStep(step)
        self._pending: deque[ItemId] = deque()

    @property
    def manager(self) -> RoundManager:
        return self._manager

    @property
    def clock(self) -> FixedStep:
        return self._clock

    def start(self, config: RoundConfig) -> None:
        """Start a fresh round. Drops any queued selections from the old one."""
        self._pending.clear()
        self._clock.reset()
        self._manager.start_round(config)

    def enqueue_select(self, identity: ItemId) -> None:
        """Queue a selection. Safe to call between frames."""
        self._pending.append(identity)

    def pending(self) -> int:
        return len(self._pending)

    def advance(self, frame_dt: float) -> list[tuple[ItemId, SelectOutcome]]:
        """Run every fixed step due after *frame_dt* seconds.

        Returns ``[(identity, outcome), ...]`` for the selections applied.
        Selections still queued when the round ends are dropped.
        """
        results: list[tuple[ItemId, SelectOutcome]] = []
        due = self._clock.advance(frame_dt)
        for _ in range(due):
            if self._manager.status is not RoundStatus.RUNNING:
                break
            results.extend(self._drain())
            if self._manager.status is not RoundStatus.RUNNING:
                break
            self._manager.tick(self._clock.step)
        if self._manager.status.terminal:
            self._pending.clear()
        return results

    def _drain(self) -> list[tuple[ItemId, SelectOutcome]]:
        results: list[tuple[ItemId, SelectOutcome]] = []
        while self._pending:
            identity = self._pending.popleft()
            results.append((identity, self._manager.select(identity)))
            if self._manager.status is not RoundStatus.RUNNING:
                break
        return results
