"""Lane geometry - static row layout and per-tier lane construction."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from tick_crossing.types import LaneKind


class LaneSpec(NamedTuple):
    """One row of the layout table. Moving rows carry a base speed divisor."""

    kind: LaneKind
    direction: int = 0
    base_speed: int = 0
    length: int = 0
    spawn: tuple[int, ...] = ()


@dataclass
class Item:
    """An obstacle or platform occupying ``length`` cells from ``x`` rightwards."""

    x: int
    length: int


@dataclass
class Lane:
    """A single grid row.

    ``speed`` is ticks per one-cell shift, so larger is slower. ``ticks``
    counts ticks since the last shift and ``shifted`` records whether the
    most recent tick moved the items.
    """

    kind: LaneKind
    direction: int = 0
    speed: int = 0
    length: int = 0
    spawn: tuple[int, ...] = ()
    ticks: int = 0
    items: list[Item] = field(default_factory=list)
    shifted: bool = False


# Top (goal) to bottom (start).
LAYOUT: tuple[LaneSpec, ...] = (
    LaneSpec(LaneKind.GOAL),
    LaneSpec(LaneKind.LIQUID, 1, 3, 3, (0, 5, 9)),
    LaneSpec(LaneKind.LIQUID, -1, 4, 2, (2, 7)),
    LaneSpec(LaneKind.LIQUID, 1, 3, 3, (1, 6, 10)),
    LaneSpec(LaneKind.LIQUID, -1, 3, 2, (4, 8)),
    LaneSpec(LaneKind.SAFE),
    LaneSpec(LaneKind.TRAFFIC, -1, 2, 2, (0, 4, 8)),
    LaneSpec(LaneKind.TRAFFIC, 1, 3, 3, (1, 6)),
    LaneSpec(LaneKind.TRAFFIC, -1, 2, 1, (3, 7, 10)),
    LaneSpec(LaneKind.TRAFFIC, 1, 2, 2, (2, 5, 9)),
    LaneSpec(LaneKind.SAFE),
)


def validate_layout(layout: tuple[LaneSpec, ...] | list[LaneSpec], height: int) -> None:
    """Check row count, end rows, and moving-row parameters. Raises ValueError."""
    if len(layout) != height:
        raise ValueError(f"layout has {len(layout)} rows, grid has {height}")
    if layout[0].kind is not LaneKind.GOAL:
        raise ValueError("row 0 must be a goal lane")
    if layout[-1].kind is not LaneKind.SAFE:
        raise ValueError("last row must be a safe lane")
    for y, spec in enumerate(layout):
        if not spec.kind.moving:
            continue
        if spec.direction not in (-1, 1):
            raise ValueError(f"row {y}: direction must be -1 or 1, got {spec.direction}")
        if spec.base_speed < 1:
            raise ValueError(f"row {y}: base speed must be >= 1, got {spec.base_speed}")
        if spec.length < 1:
            raise ValueError(f"row {y}: segment length must be >= 1, got {spec.length}")


def build_lanes(
    tier: int,
    layout: tuple[LaneSpec, ...] | list[LaneSpec] = LAYOUT,
    width: int = 11,
) -> list[Lane]:
    """Build fresh lanes for a speed tier.

    Each moving lane's divisor is ``max(1, base_speed - tier)``. Items are
    placed at their spawn offsets and counters start at zero.

    >>> [lane.speed for lane in build_lanes(2)][6:10]
    [1, 1, 1, 1]
    """
    lanes: list[Lane] = []
    for spec in layout:
        if not spec.kind.moving:
            lanes.append(Lane(kind=spec.kind))
            continue
        lanes.append(Lane(
            kind=spec.kind,
            direction=spec.direction,
            speed=max(1, spec.base_speed - tier),
            length=spec.length,
            spawn=spec.spawn,
            items=[Item(x=s % width, length=spec.length) for s in spec.spawn],
        ))
    return lanes
