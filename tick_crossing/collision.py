"""Collision and carry resolution. Pure occupancy helpers plus the resolver."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_crossing import signals
from tick_crossing.lanes import Lane
from tick_crossing.types import LaneKind, Outcome

if TYPE_CHECKING:
    from tick_crossing.config import GameConfig
    from tick_crossing.session import Session
    from tick_crossing.signals import SignalBus
    from tick_crossing.types import TickContext


def on_segment(x: int, start: int, length: int, width: int) -> bool:
    """True if cell ``x`` lies in the wrapping run ``[start, start + length)``.

    >>> on_segment(0, 10, 2, 11)
    True
    """
    return (x - start) % width < length


def covered(lane: Lane, x: int, width: int) -> bool:
    """True if any item on ``lane`` occupies cell ``x``."""
    return any(on_segment(x, item.x, item.length, width) for item in lane.items)


def occupied_cells(lane: Lane, width: int) -> frozenset[int]:
    return frozenset(
        (item.x + k) % width for item in lane.items for k in range(min(item.length, width))
    )


def occupancy(lanes: list[Lane], width: int) -> list[frozenset[int]]:
    """Occupied cells per row, recomputed from current item positions."""
    return [occupied_cells(lane, width) for lane in lanes]


def resolve(session: Session, config: GameConfig) -> Outcome:
    """Resolve the token for one tick: carry, hazard, goal, then progress.

    Mutates the token, goal slots, and score. Life loss and level clear are
    reported through the returned outcome; the caller owns lives and mode.
    """
    token = session.token
    width = config.width
    lane = session.lanes[token.y]

    # Carry keeps the row; only x changes.
    if lane.kind is LaneKind.LIQUID and covered(lane, token.x, width):
        if lane.shifted or not config.carry_on_shift_only:
            token.x = (token.x + lane.direction) % width

    if lane.kind is LaneKind.TRAFFIC:
        if covered(lane, token.x, width):
            return Outcome.LIFE_LOST
    elif lane.kind is LaneKind.LIQUID:
        if not covered(lane, token.x, width):
            return Outcome.LIFE_LOST
    elif lane.kind is LaneKind.GOAL:
        # Cells without a slot read as already filled.
        if session.slots.get(token.x, True):
            return Outcome.LIFE_LOST
        session.slots[token.x] = True
        session.score += config.goal_points
        if session.all_slots_filled():
            return Outcome.LEVEL_CLEAR
        session.respawn(config)
        return Outcome.GOAL

    if token.y < token.best_row:
        token.best_row = token.y
        session.score += config.progress_points
        return Outcome.PROGRESS
    return Outcome.SAFE


def make_resolve_system(
    config: GameConfig,
    bus: SignalBus,
) -> Callable[[Session, TickContext], None]:
    """Return a system that resolves the token and publishes the outcome."""

    def resolve_system(session: Session, ctx: TickContext) -> None:
        x, y = session.token.position
        outcome = resolve(session, config)
        if outcome is Outcome.LIFE_LOST:
            bus.publish(signals.LIFE_LOST, x=session.token.x, y=y, kind=session.lanes[y].kind.value,
                        tick=ctx.tick_number)
        elif outcome is Outcome.GOAL:
            bus.publish(signals.GOAL_FILLED, slot=x, score=session.score, tick=ctx.tick_number)
        elif outcome is Outcome.LEVEL_CLEAR:
            bus.publish(signals.GOAL_FILLED, slot=x, score=session.score, tick=ctx.tick_number)
            bus.publish(signals.LEVEL_CLEAR, level=session.level, score=session.score,
                        tick=ctx.tick_number)
        elif outcome is Outcome.PROGRESS:
            bus.publish(signals.PROGRESS, row=y, score=session.score, tick=ctx.tick_number)

    return resolve_system
