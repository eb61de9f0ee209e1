"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from tick_crossing.types import Coord


@dataclass(frozen=True)
class GameConfig:
    """Immutable tunables for a crossing session.

    Attributes:
        width: Grid columns. Horizontal motion wraps modulo this value.
        height: Grid rows. Row 0 is the goal row, the last row is the start.
        tick_ms: Milliseconds per simulation tick.
        start: Token spawn coordinate.
        goal_slots: Goal-row columns that accept the token.
        lives: Lives at the start of a new game.
        progress_points: Award for reaching a row closer to the goal than
            any row reached so far this life.
        goal_points: Award for filling a goal slot.
        level_bonus: Award for advancing past a cleared level.
        max_tier: Highest speed tier. Tier is ``level - 1`` clamped to this.
        max_catch_up: Most ticks the loop driver runs for one frame.
        carry_on_shift_only: Carry the token only on ticks where its
            lane shifted, instead of on every tick.
    """

    width: int = 11
    height: int = 11
    tick_ms: int = 150
    start: Coord = (5, 10)
    goal_slots: tuple[int, ...] = (1, 3, 5, 7, 9)
    lives: int = 3
    progress_points: int = 10
    goal_points: int = 50
    level_bonus: int = 100
    max_tier: int = 2
    max_catch_up: int = 5
    carry_on_shift_only: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        if self.max_catch_up <= 0:
            raise ValueError("max_catch_up must be positive")
        if self.lives <= 0:
            raise ValueError("lives must be positive")
        if self.max_tier < 0:
            raise ValueError("max_tier must be non-negative")
        sx, sy = self.start
        if not (0 <= sx < self.width and 0 <= sy < self.height):
            raise ValueError(f"start {self.start} is off the {self.width}x{self.height} grid")
        if not self.goal_slots:
            raise ValueError("at least one goal slot is required")
        if len(set(self.goal_slots)) != len(self.goal_slots):
            raise ValueError(f"duplicate goal slots in {self.goal_slots}")
        for x in self.goal_slots:
            if not 0 <= x < self.width:
                raise ValueError(f"goal slot {x} is outside 0..{self.width - 1}")

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    def tier_for(self, level: int) -> int:
        return max(0, min(level - 1, self.max_tier))


DEFAULT_CONFIG = GameConfig()
