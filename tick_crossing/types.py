"""Shared enums, aliases, and the per-tick context."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Coord = tuple[int, int]


class LaneKind(Enum):
    GOAL = "goal"
    LIQUID = "liquid"
    SAFE = "safe"
    TRAFFIC = "traffic"

    @property
    def moving(self) -> bool:
        return self in (LaneKind.LIQUID, LaneKind.TRAFFIC)


class Mode(Enum):
    TITLE = "title"
    PLAYING = "playing"
    PAUSED = "paused"
    LIFE_LOST = "life_lost"
    WIN = "win"
    GAME_OVER = "game_over"


class Trigger(Enum):
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    CONTINUE = "continue"
    RESTART = "restart"
    LIFE_LOST = "life_lost"
    LEVEL_CLEAR = "level_clear"


class Outcome(Enum):
    """Result of resolving the token's fate for one tick."""

    SAFE = "safe"
    PROGRESS = "progress"
    GOAL = "goal"
    LIFE_LOST = "life_lost"
    LEVEL_CLEAR = "level_clear"


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
