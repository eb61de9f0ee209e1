"""Engine - ordered systems run once per tick against a session."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_crossing.clock import Clock

if TYPE_CHECKING:
    from tick_crossing.session import Session
    from tick_crossing.types import TickContext

System = Callable[["Session", "TickContext"], None]


class Engine:
    def __init__(self, session: Session, tick_seconds: float) -> None:
        self._session = session
        self._clock = Clock(tick_seconds)
        self._systems: list[System] = []

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def session(self) -> Session:
        return self._session

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def step(self) -> None:
        """Run one tick. Systems run in registration order."""
        self._clock.advance()
        ctx = self._clock.context()
        for system in self._systems:
            system(self._session, ctx)
