"""Layout, color, and rendering constants."""
from __future__ import annotations

DEFAULT_CELL = 48
HUD_H = 40
FPS = 60

COLOR_BG = (16, 18, 26)
COLOR_TEXT = (220, 220, 220)
COLOR_TEXT_DIM = (140, 140, 150)
COLOR_GRID = (0, 0, 0)

LANE_COLORS: dict[str, tuple[int, int, int]] = {
    "goal": (30, 70, 40),
    "liquid": (40, 80, 160),
    "safe": (70, 130, 60),
    "traffic": (55, 55, 60),
}

ITEM_COLORS: dict[str, tuple[int, int, int]] = {
    "liquid": (140, 95, 50),
    "traffic": (220, 70, 60),
}

COLOR_SLOT = (20, 45, 25)
COLOR_SLOT_FILLED = (120, 220, 120)
COLOR_TOKEN = (250, 230, 80)

OVERLAY_TEXT: dict[str, tuple[str, str]] = {
    "title": ("Crossing", "Press Enter to start"),
    "paused": ("Paused", "P or Space to resume"),
    "life_lost": ("Ouch!", "Life lost - Space to continue"),
    "win": ("Level Clear!", "Space for the next level"),
    "game_over": ("Game Over", "R to restart"),
}


def compute_layout(width: int, height: int, cell: int) -> dict[str, int]:
    """Derive pixel sizes from grid dimensions and cell size."""
    return {
        "cell": cell,
        "board_w": width * cell,
        "board_h": height * cell,
        "screen_w": width * cell,
        "screen_h": height * cell + HUD_H,
    }
