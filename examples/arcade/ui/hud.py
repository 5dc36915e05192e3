"""In-round HUD: score, lives, time, multiplier, progress bars, exit, notices."""
from __future__ import annotations

import pygame

from blade_session import Notice, SessionController

from ui.constants import (
    COLOR_EXIT,
    COLOR_FREEZE_TINT,
    COLOR_HOLD,
    COLOR_LIVES,
    COLOR_MULTIPLIER,
    COLOR_SCORE,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
)


def _bar(surface: pygame.Surface, rect: pygame.Rect, fraction: float, color: tuple[int, int, int]) -> None:
    pygame.draw.rect(surface, (40, 40, 50), rect, border_radius=4)
    fill = rect.copy()
    fill.width = int(rect.width * max(0.0, min(1.0, fraction)))
    if fill.width > 0:
        pygame.draw.rect(surface, color, fill, border_radius=4)


def draw_hud(surface: pygame.Surface, fonts: dict[str, pygame.font.Font], ctrl: SessionController) -> None:
    state = ctrl.state
    rules = state.rules
    big, mid, small = fonts["big"], fonts["mid"], fonts["small"]

    if state.freeze_active:
        tint = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        tint.fill(COLOR_FREEZE_TINT)
        surface.blit(tint, (0, 0))

    if rules.score_seconds:
        score_text = f"TIME: {state.score:.2f}s"
    else:
        score_text = f"SCORE: {int(state.score)}"
    surface.blit(big.render(score_text, True, COLOR_SCORE), (30, 20))
    y = 90
    if rules.life_limited:
        surface.blit(mid.render(f"LIVES: {state.lives}", True, COLOR_LIVES), (30, y))
        y += 45
    if rules.time_limited:
        surface.blit(mid.render(f"TIME: {state.time_left}s", True, COLOR_TEXT), (30, y))
        y += 45
    if state.multiplier > 1:
        surface.blit(mid.render(f"x{state.multiplier} ACTIVE", True, COLOR_MULTIPLIER), (30, y))

    cx = surface.get_width() // 2
    step = ctrl.config.combo_step
    combo = small.render(f"COMBO {ctrl.combo_progress}/{step}", True, COLOR_TEXT_DIM)
    surface.blit(combo, combo.get_rect(midbottom=(cx, 40)))
    _bar(surface, pygame.Rect(cx - 150, 45, 300, 12), ctrl.combo_progress / step, COLOR_MULTIPLIER)
    level = small.render(f"LEVEL x{state.difficulty:.2f}", True, COLOR_TEXT_DIM)
    surface.blit(level, level.get_rect(midbottom=(cx, 85)))
    _bar(surface, pygame.Rect(cx - 150, 90, 300, 8), ctrl.level_progress, COLOR_SCORE)

    draw_exit_button(surface, small, ctrl.config.exit_rect(), ctrl.exit_progress)


def draw_exit_button(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rect: tuple[float, float, float, float],
    progress: float,
) -> None:
    r = pygame.Rect(*(int(v) for v in rect))
    pygame.draw.rect(surface, (60, 10, 10), r, border_radius=12)
    if progress > 0:
        fill = r.copy()
        fill.width = int(r.width * progress / 100.0)
        pygame.draw.rect(surface, COLOR_EXIT, fill, border_radius=12)
    pygame.draw.rect(surface, COLOR_EXIT, r, 3, border_radius=12)
    label = font.render("GRAB TO EXIT", True, COLOR_TEXT)
    surface.blit(label, label.get_rect(center=r.center))


def draw_notice(surface: pygame.Surface, font: pygame.font.Font, notice: Notice | None) -> None:
    if notice is None:
        return
    text = font.render(notice.text, True, COLOR_HOLD)
    text.set_alpha(int(255 * notice.opacity))
    surface.blit(text, text.get_rect(center=(surface.get_width() // 2, surface.get_height() // 2)))
