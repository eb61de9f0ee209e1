"""Board rendering - lanes, goal slots, moving items, and the token."""
from __future__ import annotations

from typing import Any

import pygame

from ui.constants import COLOR_GRID, COLOR_SLOT, COLOR_SLOT_FILLED, COLOR_TOKEN, ITEM_COLORS, LANE_COLORS


def draw_lanes(surface: pygame.Surface, snap: dict[str, Any], cell: int, top: int) -> None:
    """Fill each row with its lane color and mark the goal slots."""
    board_w = snap["width"] * cell
    for lane in snap["lanes"]:
        rect = pygame.Rect(0, top + lane["row"] * cell, board_w, cell)
        pygame.draw.rect(surface, LANE_COLORS.get(lane["kind"], (40, 40, 40)), rect)

    for slot in snap["slots"]:
        rect = pygame.Rect(slot["x"] * cell + 4, top + 4, cell - 8, cell - 8)
        color = COLOR_SLOT_FILLED if slot["filled"] else COLOR_SLOT
        pygame.draw.rect(surface, color, rect, border_radius=6)

    for y in range(snap["height"] + 1):
        pygame.draw.line(surface, COLOR_GRID, (0, top + y * cell), (board_w, top + y * cell))


def draw_items(surface: pygame.Surface, snap: dict[str, Any], cell: int, top: int) -> None:
    """Draw cars and rafts, sliding them toward their next cell by ``alpha``."""
    board_w = snap["width"] * cell
    alpha = snap["alpha"] if snap["mode"] == "playing" else 0.0
    for lane in snap["lanes"]:
        color = ITEM_COLORS.get(lane["kind"])
        if color is None or not lane["speed"]:
            continue
        progress = (lane["ticks"] + alpha) / lane["speed"]
        offset = lane["direction"] * progress * cell
        y = top + lane["row"] * cell
        for item in lane["items"]:
            px = item["x"] * cell + offset
            w = item["length"] * cell
            # Draw wrapped copies so items slide across the edges.
            for shift in (-board_w, 0, board_w):
                rect = pygame.Rect(int(px + shift) + 3, y + 6, w - 6, cell - 12)
                if rect.right > 0 and rect.left < board_w:
                    pygame.draw.rect(surface, color, rect, border_radius=8)


def draw_token(surface: pygame.Surface, snap: dict[str, Any], cell: int, top: int) -> None:
    if snap["mode"] not in ("playing", "paused"):
        return
    tx, ty = snap["token"]["x"], snap["token"]["y"]
    center = (tx * cell + cell // 2, top + ty * cell + cell // 2)
    pygame.draw.circle(surface, COLOR_TOKEN, center, cell // 2 - 6)
