"""Session context - every piece of mutable game state in one place."""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_crossing.config import GameConfig
from tick_crossing.lanes import LAYOUT, Lane, LaneSpec, build_lanes
from tick_crossing.types import Coord, Mode


@dataclass
class Token:
    """The player token. ``best_row`` is the smallest row reached this life."""

    x: int
    y: int
    best_row: int

    @property
    def position(self) -> Coord:
        return (self.x, self.y)


@dataclass
class Session:
    lanes: list[Lane]
    token: Token
    slots: dict[int, bool]
    score: int = 0
    lives: int = 3
    level: int = 1
    mode: Mode = Mode.TITLE
    best: int = 0
    layout: tuple[LaneSpec, ...] = field(default=LAYOUT, repr=False)

    @classmethod
    def create(
        cls,
        config: GameConfig,
        layout: tuple[LaneSpec, ...] = LAYOUT,
        best: int = 0,
    ) -> Session:
        sx, sy = config.start
        return cls(
            lanes=build_lanes(0, layout, config.width),
            token=Token(x=sx, y=sy, best_row=sy),
            slots={x: False for x in config.goal_slots},
            lives=config.lives,
            best=best,
            layout=layout,
        )

    # -- Lifecycle helpers --

    def respawn(self, config: GameConfig) -> None:
        """Return the token to the start and forget this life's progress."""
        sx, sy = config.start
        self.token.x = sx
        self.token.y = sy
        self.token.best_row = sy

    def clear_slots(self) -> None:
        for x in self.slots:
            self.slots[x] = False

    def rebuild_lanes(self, config: GameConfig) -> None:
        self.lanes = build_lanes(config.tier_for(self.level), self.layout, config.width)

    def reset(self, config: GameConfig) -> None:
        """Start a new game: counters, lanes, slots, and token."""
        self.score = 0
        self.lives = config.lives
        self.level = 1
        self.rebuild_lanes(config)
        self.clear_slots()
        self.respawn(config)

    def advance_level(self, config: GameConfig) -> None:
        self.level += 1
        self.score += config.level_bonus
        self.clear_slots()
        self.rebuild_lanes(config)
        self.respawn(config)

    # -- Queries --

    def all_slots_filled(self) -> bool:
        return all(self.slots.values())
