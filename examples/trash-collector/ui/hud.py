"""Score and timer readout."""
from __future__ import annotations

import math

import pygame

from tick_minigame import RoundManager

from ui.constants import PLAY_W, PLAY_X, TEXT


class Hud:
    def __init__(self) -> None:
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 18)
        return self._font

    def draw(self, surface: pygame.Surface, manager: RoundManager) -> None:
        font = self._get_font()
        score = font.render(
            f"Collected: {manager.collected}/{manager.target_count}", True, TEXT
        )
        timer = font.render(f"Time: {math.ceil(manager.remaining)}", True, TEXT)
        surface.blit(score, (PLAY_X, 76))
        surface.blit(timer, (PLAY_X + PLAY_W - timer.get_width(), 76))
