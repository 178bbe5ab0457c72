"""Minigame popup window: start/close buttons and the end-of-round summary."""
from __future__ import annotations

import pygame

from tick_minigame import OrderedSummary, RoundStatus

from game.catalog import ASSET_COLORS, LABELS
from ui.constants import (
    BACKDROP, BUTTON, BUTTON_HOVER, PLAY_BG, PLAY_H, PLAY_W, PLAY_X, PLAY_Y,
    SCREEN_H, SCREEN_W, TEXT, WINDOW_BG,
)

WINDOW = pygame.Rect(PLAY_X - 20, 20, PLAY_W + 40, SCREEN_H - 40)
START_BUTTON = pygame.Rect(SCREEN_W // 2 - 130, SCREEN_H - 80, 120, 36)
CLOSE_BUTTON = pygame.Rect(SCREEN_W // 2 + 10, SCREEN_H - 80, 120, 36)


class Popup:
    """Window hosting the minigame.

    Once a round has finished the popup is locked: Start disappears for good
    and only Close remains.
    """

    def __init__(self) -> None:
        self.is_open = False
        self.playing = False
        self.locked = False
        self.title = "Trash Collector"
        self._summary: OrderedSummary | None = None
        self._font: pygame.font.Font | None = None
        self._big: pygame.font.Font | None = None

    def _fonts(self) -> tuple[pygame.font.Font, pygame.font.Font]:
        if self._font is None or self._big is None:
            self._font = pygame.font.SysFont("monospace", 16)
            self._big = pygame.font.SysFont("monospace", 24, bold=True)
        return self._font, self._big

    def open(self) -> None:
        if self.is_open:
            return
        self.is_open = True
        self.playing = False
        if not self.locked:
            self._summary = None

    def close(self) -> None:
        self.is_open = False
        self.playing = False

    def begin(self) -> bool:
        """Switch to the playing view. False if the popup is locked."""
        if self.locked:
            return False
        self.playing = True
        self._summary = None
        return True

    def show_end(
        self, status: RoundStatus, summary: OrderedSummary, collected: int, total: int,
    ) -> None:
        self.locked = True
        self.playing = False
        self.is_open = True
        self._summary = summary
        if status is RoundStatus.WON:
            self.title = f"You Win - Collected: {collected}/{total}"
        else:
            self.title = f"Game Over - Collected: {collected}/{total}"

    def click(self, pos: tuple[int, int]) -> str | None:
        """Return "start" or "close" if a visible button was hit."""
        if not self.is_open or self.playing:
            return None
        if not self.locked and START_BUTTON.collidepoint(pos):
            return "start"
        if CLOSE_BUTTON.collidepoint(pos):
            return "close"
        return None

    def draw(self, surface: pygame.Surface, mouse: tuple[int, int]) -> None:
        if not self.is_open:
            return
        font, big = self._fonts()

        if not self.playing:
            dim = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
            dim.fill(BACKDROP)
            surface.blit(dim, (0, 0))
            pygame.draw.rect(surface, WINDOW_BG, WINDOW, border_radius=8)

        pygame.draw.rect(surface, PLAY_BG, pygame.Rect(PLAY_X, PLAY_Y, PLAY_W, PLAY_H))
        title = big.render(self.title, True, TEXT)
        surface.blit(title, (SCREEN_W // 2 - title.get_width() // 2, 36))

        if self.playing:
            return

        if self._summary is not None:
            self._draw_summary(surface, font)

        if not self.locked:
            self._draw_button(surface, font, START_BUTTON, "Start", mouse)
        self._draw_button(surface, font, CLOSE_BUTTON, "Close", mouse)

    def _draw_summary(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        x = PLAY_X + 40
        y = PLAY_Y + 30
        if not self._summary:
            surface.blit(font.render("No items recorded", True, TEXT), (x, y))
            return
        for row in self._summary:
            color = ASSET_COLORS.get(str(row.tag), (200, 200, 200))
            pygame.draw.circle(surface, color, (x, y + 9), 9)
            label = LABELS.get(str(row.tag), str(row.tag))
            surface.blit(font.render(f"{label}  x {row.count}", True, TEXT), (x + 20, y))
            y += 26

    @staticmethod
    def _draw_button(
        surface: pygame.Surface,
        font: pygame.font.Font,
        rect: pygame.Rect,
        label: str,
        mouse: tuple[int, int],
    ) -> None:
        color = BUTTON_HOVER if rect.collidepoint(mouse) else BUTTON
        pygame.draw.rect(surface, color, rect, border_radius=6)
        text = font.render(label, True, TEXT)
        surface.blit(text, text.get_rect(center=rect.center))
