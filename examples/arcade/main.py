"""Blade Arcade - slice flying fruit with your index finger.

A webcam hand-tracked arcade round built on the blade packages. Point with
your index finger to aim the blade, close your hand over a button and hold
it to choose.

Controls:
  Hand        Index fingertip is the blade and the menu cursor
  Grab+hold   Confirm a menu button, or leave a round on the exit region
  Escape      Leave the round / back to the menu / quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from blade import ConfigError, GameConfig, RoundSettings, load_config, parse_mode, signals
from blade_board import Leaderboard
from blade_session import Phase
from blade_vision import Camera, CameraError, HandFeed
from blade_vision.tracker import DEFAULT_MODEL_PATH, HandTracker, ensure_model

from game.app import MENU, PLAY, RESULTS, App, subscribe_sounds
from ui.constants import COLOR_BG, FPS, TITLE
from ui.hud import draw_hud, draw_notice
from ui.menu import draw_cursor, draw_menu, draw_results
from ui.playfield import (
    MissMarkers,
    draw_calibration,
    draw_items,
    draw_particles,
    draw_target,
    draw_trail,
)
from ui.sound import SoundBank
from ui.video import frame_to_surface

logger = logging.getLogger("arcade")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Blade Arcade - hand-tracked slicing game")
    p.add_argument("--mode", type=str, default=None,
                   help="Skip the menu and start this mode (timed, survival, dodge)")
    p.add_argument("--duration", type=int, default=60, help="Timed round length in seconds (default: 60)")
    p.add_argument("--camera", type=int, default=0, help="Camera index (default: 0)")
    p.add_argument("--model", type=str, default=str(DEFAULT_MODEL_PATH),
                   help="Hand landmarker model path, downloaded if missing")
    p.add_argument("--board", type=str, default="leaderboard.json", help="Leaderboard file")
    p.add_argument("--config", type=str, default=None, metavar="FILE", help="TOML config overrides")
    p.add_argument("--seed", type=int, default=None, help="Random seed for spawns")
    p.add_argument("--log-level", type=str, default="INFO", help="Logging level (default: INFO)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config(args.config) if args.config else GameConfig()
        first_round = (
            RoundSettings(mode=parse_mode(args.mode), duration=args.duration) if args.mode else None
        )
    except ConfigError as exc:
        logger.error("%s", exc)
        sys.exit(2)

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    fonts = {
        "huge": pygame.font.SysFont("monospace", 64, bold=True),
        "big": pygame.font.SysFont("monospace", 40, bold=True),
        "mid": pygame.font.SysFont("monospace", 26, bold=True),
        "small": pygame.font.SysFont("monospace", 18),
    }
    sounds = SoundBank()
    markers = MissMarkers()
    board = Leaderboard(args.board)

    def _on_round(ctrl) -> None:
        markers.clear()
        subscribe_sounds(ctrl, sounds.play)
        ctrl.bus.subscribe(signals.MISS, lambda _n, d: markers.add(d["x"], config.height - 50))

    try:
        tracker = HandTracker(ensure_model(args.model)).open()
        with HandFeed(Camera(args.camera, config.width, config.height), tracker) as feed:
            app = App(config, tracker.hands, board, feed.latest_frame, seed=args.seed, on_round=_on_round)
            if first_round is not None:
                app.start_round(first_round)
            _run(screen, pg_clock, fonts, app, feed, markers)
    except CameraError as exc:
        logger.error("camera unavailable: %s", exc)
        sys.exit(1)
    finally:
        pygame.quit()


def _run(screen, pg_clock, fonts, app: App, feed: HandFeed, markers: MissMarkers) -> None:
    photos: dict = {}
    now_ms = 0.0
    while app.running:
        dt_ms = pg_clock.tick(FPS)
        now_ms += dt_ms

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                app.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                app.back()

        if feed.error is not None:
            logger.error("perception stopped, quitting")
            app.running = False

        app.update(dt_ms, now_ms)
        markers.update()

        frame = feed.latest_frame()
        if frame is not None:
            screen.blit(frame_to_surface(frame, screen.get_size()), (0, 0))
        else:
            screen.fill(COLOR_BG)

        if app.screen == MENU:
            draw_menu(screen, fonts, app.menu)
        elif app.screen == PLAY and app.controller is not None:
            _draw_round(screen, fonts, app, markers)
        elif app.screen == RESULTS and app.results is not None:
            draw_results(screen, fonts, app.results, photos)

        pygame.display.flip()


def _draw_round(screen, fonts, app: App, markers: MissMarkers) -> None:
    ctrl = app.controller
    config = ctrl.config
    if ctrl.phase is Phase.CALIBRATING:
        draw_calibration(screen, fonts["mid"], ctrl.world.center, config.calibration_radius,
                         ctrl.calibration_progress)
        draw_cursor(screen, ctrl.pointer)
        return
    now_ms = ctrl.engine.clock.now_ms
    if ctrl.target is not None:
        draw_target(screen, ctrl.target, config.guard_radius)
    draw_items(screen, ctrl.world, now_ms, config.fade_ms)
    draw_particles(screen, ctrl.world)
    markers.draw(screen)
    draw_trail(screen, ctrl.trail.points())
    draw_hud(screen, fonts, ctrl)
    draw_notice(screen, fonts["huge"], ctrl.notice)
    draw_cursor(screen, ctrl.pointer)


if __name__ == "__main__":
    main()
