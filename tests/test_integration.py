"""End-to-end play sessions driven only through commands and ticks."""
from __future__ import annotations

from tick_crossing import (
    LEFT,
    RIGHT,
    UP,
    Continue,
    Game,
    GameConfig,
    LaneKind,
    LaneSpec,
    Mode,
    Start,
)

OPEN = (LaneSpec(LaneKind.GOAL),) + (LaneSpec(LaneKind.SAFE),) * 10

ROAD = (
    (LaneSpec(LaneKind.GOAL),)
    + (LaneSpec(LaneKind.SAFE),) * 8
    + (LaneSpec(LaneKind.TRAFFIC, 1, 1000, 1, (2,)),)
    + (LaneSpec(LaneKind.SAFE),)
)

# One wide raft on row 1 drifting right every tick.
RIVER = (
    (LaneSpec(LaneKind.GOAL),)
    + (LaneSpec(LaneKind.LIQUID, 1, 1, 4, (3,)),)
    + (LaneSpec(LaneKind.SAFE),) * 9
)


def _walk_home(game: Game, slot: int) -> None:
    """Walk from the start column to ``slot`` and straight up, ticking each step."""
    x = game.token[0]
    step = RIGHT if slot > x else LEFT
    for _ in range(abs(slot - x)):
        game.command(step)
        game.tick()
    for _ in range(game.config.height - 1):
        game.command(UP)
        game.tick()


def test_progress_then_crash_then_continue():
    game = Game(layout=ROAD)
    game.command(Start())
    assert (game.score, game.lives, game.level) == (0, 3, 1)

    game.command(UP)
    game.tick()
    assert game.score == 10
    assert game.lives == 3

    for _ in range(3):
        game.command(LEFT)
    game.tick()
    assert game.lives == 2
    assert game.mode is Mode.LIFE_LOST

    game.command(Continue())
    assert game.token == game.config.start
    assert game.mode is Mode.PLAYING


def test_fill_every_slot_to_win():
    game = Game(layout=OPEN)
    game.command(Start())
    per_trip = 9 * 10 + 50

    for n, slot in enumerate((1, 3, 5, 7, 9), start=1):
        _walk_home(game, slot)
        assert game.session.slots[slot] is True
        assert game.score == n * per_trip
        if n < 5:
            assert game.mode is Mode.PLAYING
            assert game.token == (5, 10)

    assert game.mode is Mode.WIN
    assert game.score == 5 * per_trip

    game.command(Continue())
    assert game.level == 2
    assert game.score == 5 * per_trip + 100
    assert not any(game.session.slots.values())


def test_filled_slot_costs_a_life():
    game = Game(layout=OPEN)
    game.command(Start())
    _walk_home(game, 3)
    _walk_home(game, 3)
    assert game.mode is Mode.LIFE_LOST
    assert game.lives == 2
    assert game.score == 140 + 90


def test_gap_cell_costs_a_life():
    game = Game(layout=OPEN)
    game.command(Start())
    _walk_home(game, 4)
    assert game.mode is Mode.LIFE_LOST
    assert not any(game.session.slots.values())


def test_riding_a_raft():
    game = Game(layout=RIVER)
    game.command(Start())
    game.session.token.y = 2
    game.session.token.best_row = 2

    # The raft spans 3..6 and shifts right every tick.
    game.command(UP)
    game.tick()
    assert game.mode is Mode.PLAYING
    assert game.token == (6, 1)

    game.tick()
    assert game.token == (7, 1)
    assert [item.x for item in game.session.lanes[1].items] == [5]


def test_missing_the_raft_drowns():
    game = Game(layout=RIVER)
    game.command(Start())
    game.session.token.y = 2
    game.session.token.x = 0
    game.command(UP)
    game.tick()
    assert game.mode is Mode.LIFE_LOST


def test_wall_clock_driving():
    game = Game(GameConfig(tick_ms=125), layout=OPEN)
    game.command(Start())
    game.command(UP)
    ran = sum(game.update(0.03125) for _ in range(8))
    assert ran == 2
    assert game.score == 10
