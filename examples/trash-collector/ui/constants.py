"""Screen layout and colors."""
from __future__ import annotations

SCREEN_W = 960
SCREEN_H = 600
FPS = 60
TPS = 20

# World units -> pixels. The default spawn bounds (16 x 9) fill the play area.
PIXELS_PER_UNIT = 48
PLAY_W = 16 * PIXELS_PER_UNIT
PLAY_H = 9 * PIXELS_PER_UNIT
PLAY_X = (SCREEN_W - PLAY_W) // 2
PLAY_Y = 110

ITEM_RADIUS = 14
TARGET_SCALE = 1.15
BOB_AMPLITUDE = 0.08
BOB_SPEED = 2.2

BACKGROUND = (24, 26, 34)
BACKDROP = (0, 0, 0, 150)
WINDOW_BG = (48, 52, 64)
PLAY_BG = (70, 92, 70)
TARGET_COLOR = (255, 235, 77)
NORMAL_TINT = (255, 255, 255)
TEXT = (230, 230, 230)
BUTTON = (90, 110, 160)
BUTTON_HOVER = (120, 140, 200)
