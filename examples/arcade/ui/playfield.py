"""Items, halves, particles, the blade trail and the calibration ring."""
from __future__ import annotations

import math

import pygame

from blade import Category, Half, World
from blade_sim import opacity

from ui.constants import (
    BLADE_WIDTH,
    COLOR_BOMB_RING,
    COLOR_MISS,
    COLOR_TARGET,
    COLOR_TEXT,
    COLOR_TRAIL,
    ITEM_RADIUS,
    MISS_MARKER_DECAY,
    MISS_MARKER_SIZE,
    OVERLAY_CALIBRATING,
)


def _item_sprite(color: tuple[int, int, int], radius: int, alpha: int, category: Category) -> pygame.Surface:
    size = radius * 2 + 8
    sprite = pygame.Surface((size, size), pygame.SRCALPHA)
    center = (size // 2, size // 2)
    pygame.draw.circle(sprite, (*color, alpha), center, radius)
    if category is Category.BOMB:
        pygame.draw.circle(sprite, (*COLOR_BOMB_RING, alpha), center, radius, 4)
        pygame.draw.line(sprite, (*COLOR_BOMB_RING, alpha), center, (center[0], 2), 4)
    elif category is Category.ICE:
        pygame.draw.circle(sprite, (255, 255, 255, alpha), center, radius, 3)
    else:
        highlight = (min(255, color[0] + 60), min(255, color[1] + 60), min(255, color[2] + 60), alpha)
        pygame.draw.circle(sprite, highlight, (center[0] - radius // 3, center[1] - radius // 3), radius // 4)
    return sprite


def draw_items(surface: pygame.Surface, world: World, now_ms: float, fade_ms: float) -> None:
    for item in world.items():
        alpha = int(255 * opacity(item, now_ms, fade_ms))
        if alpha <= 0:
            continue
        radius = int(ITEM_RADIUS * item.scale)
        sprite = _item_sprite(item.color, radius, alpha, item.category)
        if item.is_half:
            w, h = sprite.get_size()
            if item.halved is Half.LEFT:
                sprite.fill((0, 0, 0, 0), pygame.Rect(w // 2, 0, w - w // 2, h))
            else:
                sprite.fill((0, 0, 0, 0), pygame.Rect(0, 0, w // 2, h))
        rotated = pygame.transform.rotate(sprite, -math.degrees(item.rotation))
        x, y = item.position
        surface.blit(rotated, rotated.get_rect(center=(int(x), int(y))))


def draw_particles(surface: pygame.Surface, world: World) -> None:
    if not world.particles:
        return
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    for p in world.particles:
        alpha = int(255 * max(0.0, min(1.0, p.life)))
        pygame.draw.circle(overlay, (*p.color, alpha), (int(p.position[0]), int(p.position[1])), int(p.size))
    surface.blit(overlay, (0, 0))


def draw_trail(surface: pygame.Surface, points: list[tuple[float, float]]) -> None:
    if len(points) < 2:
        return
    pygame.draw.lines(surface, COLOR_TRAIL, False, [(int(x), int(y)) for x, y in points], BLADE_WIDTH)
    pygame.draw.circle(surface, (255, 255, 255), (int(points[0][0]), int(points[0][1])), BLADE_WIDTH // 2 + 2)


def draw_target(surface: pygame.Surface, center: tuple[float, float], radius: float) -> None:
    c = (int(center[0]), int(center[1]))
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    pygame.draw.circle(overlay, (*COLOR_TARGET, 50), c, int(radius))
    surface.blit(overlay, (0, 0))
    pygame.draw.circle(surface, COLOR_TARGET, c, int(radius), 3)


def draw_calibration(
    surface: pygame.Surface,
    font: pygame.font.Font,
    center: tuple[float, float],
    radius: float,
    progress: float,
) -> None:
    """Darkened view with the hold circle and a clockwise progress arc."""
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill(OVERLAY_CALIBRATING)
    surface.blit(overlay, (0, 0))
    cx, cy = int(center[0]), int(center[1])
    r = int(radius)
    pygame.draw.circle(surface, (255, 255, 255), (cx, cy), r, 4)
    if progress > 0:
        rect = pygame.Rect(cx - r - 8, cy - r - 8, 2 * (r + 8), 2 * (r + 8))
        # pygame arcs run counter-clockwise; start at 12 o'clock and sweep back.
        sweep = 2 * math.pi * progress / 100.0
        pygame.draw.arc(surface, COLOR_TRAIL, rect, math.pi / 2 - sweep, math.pi / 2, 8)
    label = font.render("Hold your finger inside the circle", True, COLOR_TEXT)
    surface.blit(label, label.get_rect(center=(cx, cy + r + 50)))
    pct = font.render(f"{int(progress)}%", True, COLOR_TEXT)
    surface.blit(pct, pct.get_rect(center=(cx, cy)))


class MissMarkers:
    """Red crosses where fruit fell off the bottom, fading out."""

    def __init__(self) -> None:
        self._markers: list[list[float]] = []

    def add(self, x: float, y: float) -> None:
        self._markers.append([x, y, 1.0])

    def clear(self) -> None:
        self._markers.clear()

    def update(self) -> None:
        for marker in self._markers:
            marker[2] -= MISS_MARKER_DECAY
        self._markers = [m for m in self._markers if m[2] > 0]

    def draw(self, surface: pygame.Surface) -> None:
        s = MISS_MARKER_SIZE
        for x, y, life in self._markers:
            overlay = pygame.Surface((2 * s + 10, 2 * s + 10), pygame.SRCALPHA)
            color = (*COLOR_MISS, int(255 * life))
            pygame.draw.line(overlay, color, (5, 5), (2 * s + 5, 2 * s + 5), 10)
            pygame.draw.line(overlay, color, (2 * s + 5, 5), (5, 2 * s + 5), 10)
            surface.blit(overlay, (int(x) - s - 5, int(y) - s - 5))
