"""Tests for the mode transition table and StateMachine dispatch."""
from __future__ import annotations

import pytest
from tick_crossing.config import GameConfig
from tick_crossing.machine import TRANSITIONS, Guards, StateMachine, default_guards
from tick_crossing.session import Session
from tick_crossing.types import Mode, Trigger


@pytest.fixture
def session() -> Session:
    return Session.create(GameConfig())


def _machine(session: Session, mode: Mode, log: list | None = None) -> StateMachine:
    session.mode = mode
    callback = None if log is None else (lambda old, new, trig: log.append((old, new, trig)))
    return StateMachine(session, on_transition=callback)


class TestTable:
    def test_every_mode_has_edges(self) -> None:
        assert set(TRANSITIONS) == set(Mode)

    def test_restart_everywhere(self) -> None:
        for mode, edges in TRANSITIONS.items():
            assert any(t is Trigger.RESTART for t, _, _ in edges), mode

    def test_guards_all_registered(self, session) -> None:
        guards = default_guards()
        for edges in TRANSITIONS.values():
            for _, guard, _ in edges:
                guards.check(guard, session)


class TestTransitions:
    @pytest.mark.parametrize(
        ("mode", "trigger", "target"),
        [
            (Mode.TITLE, Trigger.START, Mode.PLAYING),
            (Mode.PLAYING, Trigger.PAUSE, Mode.PAUSED),
            (Mode.PAUSED, Trigger.RESUME, Mode.PLAYING),
            (Mode.PAUSED, Trigger.CONTINUE, Mode.PLAYING),
            (Mode.PLAYING, Trigger.LEVEL_CLEAR, Mode.WIN),
            (Mode.LIFE_LOST, Trigger.CONTINUE, Mode.PLAYING),
            (Mode.WIN, Trigger.CONTINUE, Mode.PLAYING),
            (Mode.GAME_OVER, Trigger.RESTART, Mode.PLAYING),
            (Mode.TITLE, Trigger.RESTART, Mode.PLAYING),
        ],
    )
    def test_edge(self, session, mode, trigger, target) -> None:
        machine = _machine(session, mode)
        assert machine.fire(trigger) is target
        assert session.mode is target

    def test_life_lost_with_lives_left(self, session) -> None:
        session.lives = 2
        machine = _machine(session, Mode.PLAYING)
        assert machine.fire(Trigger.LIFE_LOST) is Mode.LIFE_LOST

    def test_life_lost_with_no_lives_is_game_over(self, session) -> None:
        session.lives = 0
        machine = _machine(session, Mode.PLAYING)
        assert machine.fire(Trigger.LIFE_LOST) is Mode.GAME_OVER

    @pytest.mark.parametrize(
        ("mode", "trigger"),
        [
            (Mode.TITLE, Trigger.CONTINUE),
            (Mode.TITLE, Trigger.PAUSE),
            (Mode.PLAYING, Trigger.START),
            (Mode.PLAYING, Trigger.RESUME),
            (Mode.PAUSED, Trigger.PAUSE),
            (Mode.PAUSED, Trigger.LIFE_LOST),
            (Mode.LIFE_LOST, Trigger.PAUSE),
            (Mode.WIN, Trigger.LIFE_LOST),
            (Mode.GAME_OVER, Trigger.CONTINUE),
            (Mode.GAME_OVER, Trigger.START),
        ],
    )
    def test_inapplicable_trigger_is_noop(self, session, mode, trigger) -> None:
        log: list = []
        machine = _machine(session, mode, log)
        assert machine.fire(trigger) is None
        assert session.mode is mode
        assert log == []

    def test_callback_sees_old_new_trigger(self, session) -> None:
        log: list = []
        machine = _machine(session, Mode.PLAYING, log)
        machine.fire(Trigger.PAUSE)
        assert log == [(Mode.PLAYING, Mode.PAUSED, Trigger.PAUSE)]

    def test_callback_runs_after_mode_change(self, session) -> None:
        seen: list[Mode] = []
        session.mode = Mode.TITLE
        machine = StateMachine(session, on_transition=lambda o, n, t: seen.append(session.mode))
        machine.fire(Trigger.START)
        assert seen == [Mode.PLAYING]


class TestGuards:
    def test_register_and_check(self, session) -> None:
        guards = Guards()
        guards.register("rich", lambda s: s.score > 100)
        assert not guards.check("rich", session)
        session.score = 500
        assert guards.check("rich", session)

    def test_unknown_guard_raises(self, session) -> None:
        with pytest.raises(KeyError):
            Guards().check("missing", session)

    def test_custom_table(self, session) -> None:
        guards = Guards()
        guards.register("never", lambda s: False)
        guards.register("always", lambda s: True)
        table = {Mode.TITLE: [(Trigger.START, "never", Mode.WIN), (Trigger.START, "always", Mode.PAUSED)]}
        session.mode = Mode.TITLE
        machine = StateMachine(session, guards=guards, transitions=table)
        assert machine.fire(Trigger.START) is Mode.PAUSED
