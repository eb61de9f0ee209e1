"""Game state machine - transition table, guards, and dispatch."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from tick_crossing.types import Mode, Trigger

if TYPE_CHECKING:
    from tick_crossing.session import Session

logger = logging.getLogger(__name__)

Guard = Callable[["Session"], bool]
TransitionCallback = Callable[[Mode, Mode, Trigger], None]

# Per mode: (trigger, guard, target) edges, first passing guard wins.
TRANSITIONS: dict[Mode, list[tuple[Trigger, str, Mode]]] = {
    Mode.TITLE: [
        (Trigger.START, "always", Mode.PLAYING),
        (Trigger.RESTART, "always", Mode.PLAYING),
    ],
    Mode.PLAYING: [
        (Trigger.PAUSE, "always", Mode.PAUSED),
        (Trigger.LIFE_LOST, "has_lives", Mode.LIFE_LOST),
        (Trigger.LIFE_LOST, "always", Mode.GAME_OVER),
        (Trigger.LEVEL_CLEAR, "always", Mode.WIN),
        (Trigger.RESTART, "always", Mode.PLAYING),
    ],
    Mode.PAUSED: [
        (Trigger.RESUME, "always", Mode.PLAYING),
        (Trigger.CONTINUE, "always", Mode.PLAYING),
        (Trigger.RESTART, "always", Mode.PLAYING),
    ],
    Mode.LIFE_LOST: [
        (Trigger.CONTINUE, "always", Mode.PLAYING),
        (Trigger.RESTART, "always", Mode.PLAYING),
    ],
    Mode.WIN: [
        (Trigger.CONTINUE, "always", Mode.PLAYING),
        (Trigger.RESTART, "always", Mode.PLAYING),
    ],
    Mode.GAME_OVER: [
        (Trigger.RESTART, "always", Mode.PLAYING),
    ],
}


class Guards:
    """Maps guard names to predicates over the session."""

    def __init__(self) -> None:
        self._guards: dict[str, Guard] = {}

    def register(self, name: str, fn: Guard) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, session: Session) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](session)


def default_guards() -> Guards:
    guards = Guards()
    guards.register("always", lambda s: True)
    guards.register("has_lives", lambda s: s.lives > 0)
    return guards


class StateMachine:
    """Drives ``session.mode`` through the transition table.

    ``fire`` looks up the current mode's edges for a trigger and takes the
    first one whose guard passes. Triggers with no applicable edge are
    ignored and return None. ``on_transition(old, new, trigger)`` runs
    after the mode has changed.
    """

    def __init__(
        self,
        session: Session,
        guards: Guards | None = None,
        transitions: dict[Mode, list[tuple[Trigger, str, Mode]]] | None = None,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        self._session = session
        self._guards = guards if guards is not None else default_guards()
        self._transitions = transitions if transitions is not None else TRANSITIONS
        self._on_transition = on_transition

    def fire(self, trigger: Trigger) -> Mode | None:
        old = self._session.mode
        for edge_trigger, guard, target in self._transitions.get(old, ()):
            if edge_trigger is not trigger:
                continue
            if not self._guards.check(guard, self._session):
                continue
            self._session.mode = target
            logger.info("mode %s -> %s on %s", old.value, target.value, trigger.value)
            if self._on_transition is not None:
                self._on_transition(old, target, trigger)
            return target
        logger.debug("ignored %s in mode %s", trigger.value, old.value)
        return None
