"""Game - session ownership, system wiring, commands, and render snapshots."""
from __future__ import annotations

import logging
from typing import Any

from tick_crossing import signals
from tick_crossing.clock import FixedStepDriver
from tick_crossing.collision import make_resolve_system, occupied_cells
from tick_crossing.commands import (
    CommandRouter,
    Continue,
    Move,
    Pause,
    Restart,
    Resume,
    Start,
    TogglePause,
)
from tick_crossing.config import DEFAULT_CONFIG, GameConfig
from tick_crossing.engine import Engine
from tick_crossing.lanes import LAYOUT, LaneSpec, validate_layout
from tick_crossing.machine import StateMachine
from tick_crossing.motion import make_motion_system
from tick_crossing.session import Session
from tick_crossing.signals import SignalBus, make_signal_system
from tick_crossing.store import BestScoreStore, MemoryStore
from tick_crossing.types import Coord, Mode, Trigger

logger = logging.getLogger(__name__)


class Game:
    """One player's crossing game.

    Input collaborators call ``command``; the host loop calls ``update``
    with elapsed wall-clock seconds once per frame and reads ``snapshot``
    afterwards. Ticks only run while the mode is ``playing``.
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        store: BestScoreStore | None = None,
        layout: tuple[LaneSpec, ...] = LAYOUT,
    ) -> None:
        validate_layout(layout, config.height)
        self._config = config
        self._store: BestScoreStore = store if store is not None else MemoryStore()
        self._session = Session.create(config, layout, best=self._store.load())
        self._bus = SignalBus()
        self._machine = StateMachine(self._session, on_transition=self._on_transition)
        self._driver = FixedStepDriver(config.tick_seconds, config.max_catch_up)

        self._engine = Engine(self._session, config.tick_seconds)
        self._engine.add_system(make_motion_system(config.width))
        self._engine.add_system(make_resolve_system(config, self._bus))
        self._engine.add_system(make_signal_system(self._bus))

        self._bus.subscribe(signals.LIFE_LOST, self._on_life_lost)
        self._bus.subscribe(signals.LEVEL_CLEAR, self._on_level_clear)

        self._router = CommandRouter()
        self._router.handle(Move, self._handle_move)
        self._router.handle(Start, lambda cmd: self._fire(Trigger.START))
        self._router.handle(Pause, lambda cmd: self._fire(Trigger.PAUSE))
        self._router.handle(Resume, lambda cmd: self._fire(Trigger.RESUME))
        self._router.handle(TogglePause, self._handle_toggle_pause)
        self._router.handle(Continue, lambda cmd: self._fire(Trigger.CONTINUE))
        self._router.handle(Restart, lambda cmd: self._fire(Trigger.RESTART))

    # -- Accessors --

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def session(self) -> Session:
        return self._session

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def driver(self) -> FixedStepDriver:
        return self._driver

    @property
    def mode(self) -> Mode:
        return self._session.mode

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def lives(self) -> int:
        return self._session.lives

    @property
    def level(self) -> int:
        return self._session.level

    @property
    def best(self) -> int:
        return self._session.best

    @property
    def token(self) -> Coord:
        return self._session.token.position

    # -- Input --

    def command(self, cmd: Any) -> bool:
        """Apply an input command now. Returns False if it did not apply."""
        if not self._router.handles(type(cmd)):
            logger.debug("ignored unknown command %r", cmd)
            return False
        accepted = self._router.dispatch(cmd)
        while self._bus.pending():
            self._bus.flush()
        if not accepted:
            logger.debug("rejected %r in mode %s", cmd, self.mode.value)
        return accepted

    def _fire(self, trigger: Trigger) -> bool:
        return self._machine.fire(trigger) is not None

    def _handle_move(self, cmd: Move) -> bool:
        if self.mode is not Mode.PLAYING:
            return False
        token = self._session.token
        token.x = min(max(token.x + cmd.dx, 0), self._config.width - 1)
        token.y = min(max(token.y + cmd.dy, 0), self._config.height - 1)
        return True

    def _handle_toggle_pause(self, cmd: TogglePause) -> bool:
        if self.mode is Mode.PAUSED:
            return self._fire(Trigger.RESUME)
        return self._fire(Trigger.PAUSE)

    # -- Simulation --

    def tick(self) -> bool:
        """Run one simulation tick if playing. Returns whether it ran."""
        if self.mode is not Mode.PLAYING:
            return False
        self._engine.step()
        return True

    def update(self, elapsed: float) -> int:
        """Feed wall-clock seconds to the loop driver. Returns ticks run."""
        ran = 0
        for _ in range(self._driver.advance(elapsed)):
            if self.tick():
                ran += 1
        return ran

    # -- Signal handlers and transition effects --

    def _on_life_lost(self, name: str, data: dict[str, Any]) -> None:
        self._session.lives -= 1
        logger.info("life lost at %s on %s lane on tick %s, %d left",
                    (data.get("x"), data.get("y")), data.get("kind"), data.get("tick"),
                    self._session.lives)
        self._machine.fire(Trigger.LIFE_LOST)

    def _on_level_clear(self, name: str, data: dict[str, Any]) -> None:
        logger.info("level %d clear, score %d", self._session.level, self._session.score)
        self._machine.fire(Trigger.LEVEL_CLEAR)

    def _on_transition(self, old: Mode, new: Mode, trigger: Trigger) -> None:
        session = self._session
        if trigger in (Trigger.START, Trigger.RESTART):
            session.reset(self._config)
            self._driver.reset()
            self._engine.clock.reset()
        elif trigger is Trigger.CONTINUE and old is Mode.LIFE_LOST:
            session.respawn(self._config)
        elif trigger is Trigger.CONTINUE and old is Mode.WIN:
            session.advance_level(self._config)
        if new is Mode.GAME_OVER:
            self._record_best()
        self._bus.publish(signals.MODE_CHANGED, old=old.value, new=new.value)

    def _record_best(self) -> None:
        session = self._session
        if session.score <= session.best:
            return
        session.best = session.score
        self._store.save(session.score)
        logger.info("new best score %d", session.score)
        self._bus.publish(signals.BEST_SCORE, best=session.score)

    # -- Render view --

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible view of everything a renderer needs."""
        session = self._session
        width = self._config.width
        lanes = []
        for y, lane in enumerate(session.lanes):
            lanes.append({
                "row": y,
                "kind": lane.kind.value,
                "direction": lane.direction,
                "speed": lane.speed,
                "ticks": lane.ticks,
                "items": [{"x": item.x, "length": item.length} for item in lane.items],
                "occupied": sorted(occupied_cells(lane, width)),
            })
        return {
            "width": width,
            "height": self._config.height,
            "tick": self._engine.clock.tick_number,
            "alpha": self._driver.alpha,
            "mode": session.mode.value,
            "score": session.score,
            "lives": session.lives,
            "level": session.level,
            "best": session.best,
            "token": {"x": session.token.x, "y": session.token.y},
            "slots": [{"x": x, "filled": filled} for x, filled in session.slots.items()],
            "lanes": lanes,
        }
