"""Entity motion - per-lane tick counters and wrapping shifts."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_crossing.lanes import Lane

if TYPE_CHECKING:
    from tick_crossing.session import Session
    from tick_crossing.types import TickContext


def advance_lane(lane: Lane, width: int) -> bool:
    """Advance one lane by one tick. Returns True if its items shifted."""
    lane.shifted = False
    if not lane.kind.moving:
        return False
    lane.ticks += 1
    if lane.ticks >= lane.speed:
        lane.ticks = 0
        for item in lane.items:
            item.x = (item.x + lane.direction) % width
        lane.shifted = True
    return lane.shifted


def advance_lanes(lanes: list[Lane], width: int) -> list[int]:
    """Advance every lane by one tick. Returns the rows that shifted."""
    return [y for y, lane in enumerate(lanes) if advance_lane(lane, width)]


def make_motion_system(width: int) -> Callable[[Session, TickContext], None]:
    """Return a system that moves obstacles and platforms each tick."""

    def motion_system(session: Session, ctx: TickContext) -> None:
        advance_lanes(session.lanes, width)

    return motion_system
