"""Colors, sizes and timing for the arcade screens."""
from __future__ import annotations

FPS = 60
TITLE = "Blade Arcade"

# Items
ITEM_RADIUS = 25
BLADE_WIDTH = 10
MISS_MARKER_SIZE = 30
MISS_MARKER_DECAY = 0.02

# Colors
COLOR_BG = (5, 5, 7)
COLOR_TEXT = (235, 235, 240)
COLOR_TEXT_DIM = (150, 150, 160)
COLOR_SCORE = (251, 191, 36)
COLOR_LIVES = (239, 68, 68)
COLOR_MULTIPLIER = (34, 211, 238)
COLOR_TRAIL = (0, 255, 255)
COLOR_HOLD = (250, 204, 21)
COLOR_EXIT = (220, 38, 38)
COLOR_BUTTON = (30, 30, 40)
COLOR_BUTTON_HOVER = (60, 60, 80)
COLOR_BUTTON_SELECTED = (37, 99, 235)
COLOR_BOMB_RING = (255, 40, 40)
COLOR_TARGET = (255, 255, 255)
COLOR_MISS = (255, 0, 0)
COLOR_FREEZE_TINT = (120, 200, 255, 40)
COLOR_CURSOR = (0, 255, 255)
COLOR_CURSOR_GRAB = (250, 204, 21)

# Overlays (r, g, b, alpha)
OVERLAY_CALIBRATING = (0, 0, 0, 100)
OVERLAY_MENU = (0, 0, 0, 200)
