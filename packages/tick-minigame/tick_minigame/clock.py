"""Fixed-timestep accumulator for frame-driven loops."""
from __future__ import annotations


import math


class FixedStep:
    def __init__(self, step: float) -> None:
        if not 0 < step < math.inf:
            raise ValueError("step must be positive and finite")
        self._step = step
        self._accumulator = 0.0
        self._steps_taken = 0

    @property
    def step(self) -> float:
        return self._step

    @property
    def steps_taken(self) -> int:
        return self._steps_taken

    @property
    def pending_time(self) -> float:
        return self._accumulator

    def advance(self, frame_dt: float) -> int:
        """Add a frame's worth of time. Returns how many whole steps are due."""
        if not 0 <= frame_dt < math.inf:
            raise ValueError(f"frame_dt must be finite and >= 0, got {frame_dt}")
        self._accumulator += frame_dt
        due = 0
        while self._accumulator >= self._step:
            self._accumulator -= self._step
            due += 1
        self._steps_taken += due
        return due

    def reset(self) -> None:
        self._accumulator = 0.0
        self._steps_taken = 0
