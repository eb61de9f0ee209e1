"""Tests for lane tick counters and wrapping shifts."""
from __future__ import annotations

from tick_crossing.lanes import Item, Lane, build_lanes
from tick_crossing.motion import advance_lane, advance_lanes
from tick_crossing.types import LaneKind

W = 11


def _lane(direction: int = 1, speed: int = 3, xs: tuple[int, ...] = (0, 5)) -> Lane:
    return Lane(
        kind=LaneKind.TRAFFIC,
        direction=direction,
        speed=speed,
        length=2,
        items=[Item(x=x, length=2) for x in xs],
    )


class TestAdvanceLane:
    def test_no_shift_before_speed_ticks(self) -> None:
        lane = _lane(speed=3)
        assert advance_lane(lane, W) is False
        assert advance_lane(lane, W) is False
        assert [item.x for item in lane.items] == [0, 5]
        assert lane.ticks == 2

    def test_shift_on_speed_tick_resets_counter(self) -> None:
        lane = _lane(speed=3)
        for _ in range(2):
            advance_lane(lane, W)
        assert advance_lane(lane, W) is True
        assert lane.ticks == 0
        assert lane.shifted is True
        assert [item.x for item in lane.items] == [1, 6]

    def test_shifted_flag_clears_next_tick(self) -> None:
        lane = _lane(speed=1)
        advance_lane(lane, W)
        lane.speed = 5
        advance_lane(lane, W)
        assert lane.shifted is False

    def test_shift_count_over_many_ticks(self) -> None:
        for speed in (1, 2, 3, 4):
            lane = _lane(speed=speed)
            shifts = sum(advance_lane(lane, W) for _ in range(7 * speed))
            assert shifts == 7

    def test_counter_stays_below_speed(self) -> None:
        lane = _lane(speed=4)
        for _ in range(25):
            advance_lane(lane, W)
            assert 0 <= lane.ticks < lane.speed

    def test_wrap_right_edge(self) -> None:
        lane = _lane(direction=1, speed=1, xs=(W - 1,))
        advance_lane(lane, W)
        assert lane.items[0].x == 0

    def test_wrap_left_edge(self) -> None:
        lane = _lane(direction=-1, speed=1, xs=(0,))
        advance_lane(lane, W)
        assert lane.items[0].x == W - 1

    def test_full_cycle_returns_home(self) -> None:
        lane = _lane(direction=-1, speed=2, xs=(3, 8))
        for _ in range(2 * W):
            advance_lane(lane, W)
        assert [item.x for item in lane.items] == [3, 8]

    def test_static_lane_untouched(self) -> None:
        lane = Lane(kind=LaneKind.SAFE)
        assert advance_lane(lane, W) is False
        assert lane.ticks == 0


class TestAdvanceLanes:
    def test_reports_shifted_rows(self) -> None:
        lanes = build_lanes(0)
        # Speed-2 rows shift on the second tick.
        assert advance_lanes(lanes, W) == []
        assert advance_lanes(lanes, W) == [6, 8, 9]
        assert advance_lanes(lanes, W) == [1, 3, 4, 7]

    def test_lanes_independent(self) -> None:
        lanes = build_lanes(0)
        alone = build_lanes(0)[7]
        for _ in range(9):
            advance_lanes(lanes, W)
            advance_lane(alone, W)
        assert [i.x for i in lanes[7].items] == [i.x for i in alone.items]

    def test_items_stay_on_grid(self) -> None:
        lanes = build_lanes(2)
        for _ in range(100):
            advance_lanes(lanes, W)
            for lane in lanes:
                assert all(0 <= item.x < W for item in lane.items)
