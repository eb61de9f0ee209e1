"""Crossing - playable front-end for tick-crossing.

Guide the token from the bottom row to the five goal slots on top. Cars on
the lower lanes are deadly; the upper lanes are water and only the rafts
will hold you.

Controls:
  Arrows / WASD   Move
  Enter           Start
  P               Pause / Resume
  Space / C       Continue (after a life lost, a level clear, or a pause)
  R               Restart
  Esc             Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from tick_crossing import (
    DOWN,
    LEFT,
    RIGHT,
    UP,
    Continue,
    Game,
    GameConfig,
    JsonFileStore,
    Restart,
    Start,
    TogglePause,
)
from ui.board import draw_items, draw_lanes, draw_token
from ui.constants import COLOR_BG, DEFAULT_CELL, FPS, HUD_H, compute_layout
from ui.hud import draw_hud, draw_overlay

KEY_COMMANDS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
    pygame.K_RETURN: Start(),
    pygame.K_KP_ENTER: Start(),
    pygame.K_p: TogglePause(),
    pygame.K_SPACE: Continue(),
    pygame.K_c: Continue(),
    pygame.K_r: Restart(),
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Crossing - tick-crossing demo")
    p.add_argument("--tick-ms", type=int, default=150,
                   help="Milliseconds per simulation tick (40-1000, default: 150)")
    p.add_argument("--cell", type=int, default=DEFAULT_CELL,
                   help=f"Cell size in pixels (16-96, default: {DEFAULT_CELL})")
    p.add_argument("--best-file", type=Path, default=Path.home() / ".tick-crossing" / "best.json",
                   metavar="FILE", help="Where the best score is kept")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args()
    args.tick_ms = max(40, min(1000, args.tick_ms))
    args.cell = max(16, min(96, args.cell))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig(tick_ms=args.tick_ms)
    game = Game(config, store=JsonFileStore(args.best_file))
    layout = compute_layout(config.width, config.height, args.cell)
    cell = layout["cell"]

    pygame.init()
    screen = pygame.display.set_mode((layout["screen_w"], layout["screen_h"]))
    pygame.display.set_caption("Crossing - tick-crossing demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                cmd = KEY_COMMANDS.get(event.key)
                if cmd is not None:
                    game.command(cmd)

        # --- Tick ---
        game.update(dt)

        # --- Render ---
        snap = game.snapshot()
        screen.fill(COLOR_BG)
        draw_lanes(screen, snap, cell, HUD_H)
        draw_items(screen, snap, cell, HUD_H)
        draw_token(screen, snap, cell, HUD_H)
        draw_hud(screen, font, snap, HUD_H)
        draw_overlay(screen, font, snap, HUD_H)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
