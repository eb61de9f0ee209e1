"""HUD strip and mode overlays."""
from __future__ import annotations

from typing import Any

import pygame

from ui.constants import COLOR_TEXT, COLOR_TEXT_DIM, OVERLAY_TEXT


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, snap: dict[str, Any], height: int) -> None:
    """Score, lives, level, and best along the top edge."""
    pygame.draw.rect(surface, (10, 10, 16), pygame.Rect(0, 0, surface.get_width(), height))
    text = (
        f"Score {snap['score']:>5}   Lives {snap['lives']}   "
        f"Level {snap['level']}   Best {snap['best']}"
    )
    label = font.render(text, True, COLOR_TEXT)
    surface.blit(label, label.get_rect(midleft=(10, height // 2)))


def draw_overlay(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snap: dict[str, Any],
    top: int,
) -> None:
    """Dim the board and show the mode banner when not playing."""
    banner = OVERLAY_TEXT.get(snap["mode"])
    if banner is None:
        return
    w = surface.get_width()
    h = surface.get_height() - top
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))
    surface.blit(overlay, (0, top))

    title, hint = banner
    big_font = pygame.font.SysFont("monospace", 32, bold=True)
    text = big_font.render(title, True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=(w // 2, top + h // 2 - 10)))

    sub = hint
    if snap["mode"] == "game_over":
        sub = f"Score {snap['score']} - {hint}"
    hint_label = font.render(sub, True, COLOR_TEXT_DIM)
    surface.blit(hint_label, hint_label.get_rect(center=(w // 2, top + h // 2 + 25)))
