"""Menu and results screens: buttons with hold progress and the cursor."""
from __future__ import annotations

import pygame

from blade import rules_for
from blade_gesture import Pointer
from blade_select import Phase, SelectionMachine, Target

from game.screens import MODE_LABELS
from ui.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_HOVER,
    COLOR_BUTTON_SELECTED,
    COLOR_CURSOR,
    COLOR_CURSOR_GRAB,
    COLOR_HOLD,
    COLOR_SCORE,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    OVERLAY_MENU,
)
from ui.video import jpeg_to_surface


def dim(surface: pygame.Surface) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill(OVERLAY_MENU)
    surface.blit(overlay, (0, 0))


def draw_button(
    surface: pygame.Surface,
    font: pygame.font.Font,
    target: Target,
    label: str,
    machine: SelectionMachine,
    selected: bool = False,
) -> None:
    rect = pygame.Rect(*(int(v) for v in target.rect))
    hovered = machine.target_id == target.id and machine.phase is not Phase.IDLE
    color = COLOR_BUTTON_SELECTED if selected else COLOR_BUTTON_HOVER if hovered else COLOR_BUTTON
    pygame.draw.rect(surface, color, rect, border_radius=16)
    if hovered and machine.progress > 0:
        fill = rect.copy()
        fill.height = int(rect.height * machine.progress / 100.0)
        fill.bottom = rect.bottom
        pygame.draw.rect(surface, COLOR_HOLD, fill, border_radius=16)
    pygame.draw.rect(surface, COLOR_TEXT_DIM, rect, 2, border_radius=16)
    text = font.render(label, True, COLOR_TEXT)
    surface.blit(text, text.get_rect(center=rect.center))


def draw_cursor(surface: pygame.Surface, pointer: Pointer | None) -> None:
    if pointer is None:
        return
    color = COLOR_CURSOR_GRAB if pointer.grabbing else COLOR_CURSOR
    pos = (int(pointer.x), int(pointer.y))
    pygame.draw.circle(surface, color, pos, 18, 4)
    if pointer.grabbing:
        pygame.draw.circle(surface, color, pos, 8)


def draw_menu(surface: pygame.Surface, fonts: dict[str, pygame.font.Font], menu) -> None:
    dim(surface)
    w = surface.get_width()
    title = fonts["huge"].render("BLADE ARCADE", True, COLOR_SCORE)
    surface.blit(title, title.get_rect(center=(w // 2, 110)))
    hint = fonts["small"].render("Point at a button, close your hand and hold", True, COLOR_TEXT_DIM)
    surface.blit(hint, hint.get_rect(center=(w // 2, 175)))

    for target in menu.targets:
        if target.id.startswith("time-"):
            seconds = int(target.id.split("-", 1)[1])
            draw_button(surface, fonts["mid"], target, f"{seconds}s", menu.machine,
                        selected=seconds == menu.duration)
        else:
            draw_button(surface, fonts["mid"], target, MODE_LABELS[target.id], menu.machine)

    y = surface.get_height() - 40 - 32 * len(menu.leaders)
    surface.blit(fonts["mid"].render("TOP SCORES", True, COLOR_SCORE), (40, y - 50))
    for i, entry in enumerate(menu.leaders):
        line = f"{i + 1}. {entry.score:g}  {entry.mode}"
        surface.blit(fonts["small"].render(line, True, COLOR_TEXT), (40, y + i * 32))

    draw_cursor(surface, menu.pointer)


def draw_results(surface: pygame.Surface, fonts: dict[str, pygame.font.Font], results, photo_cache: dict) -> None:
    dim(surface)
    w = surface.get_width()
    result = results.result
    title = fonts["huge"].render("GAME OVER", True, COLOR_SCORE)
    surface.blit(title, title.get_rect(center=(w // 2, 80)))

    photo = photo_cache.get(id(result))
    if photo is None and result.photo is not None:
        photo = jpeg_to_surface(result.photo)
        photo_cache[id(result)] = photo
    if photo is not None:
        surface.blit(photo, photo.get_rect(center=(w // 2, 300)))

    if rules_for(result.mode).score_seconds:
        score = f"{result.score:.2f}s"
    else:
        score = f"{int(result.score)}"
    text = fonts["big"].render(f"{result.mode.value.upper()}  {score}", True, COLOR_TEXT)
    surface.blit(text, text.get_rect(center=(w // 2, 490)))
    if results.rank is not None:
        rank = fonts["mid"].render(f"Leaderboard rank #{results.rank}", True, COLOR_HOLD)
        surface.blit(rank, rank.get_rect(center=(w // 2, 540)))

    labels = {"restart": "PLAY AGAIN", "home": "MENU"}
    for target in results.targets:
        draw_button(surface, fonts["mid"], target, labels[target.id], results.machine)
    draw_cursor(surface, results.pointer)
