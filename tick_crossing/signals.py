"""Game signals and the bus that carries them between systems.

The resolver and the game publish these signals during a tick; the
engine's signal system dispatches them once the tick's movement and
resolution are done. Payloads:

``life_lost``    ``x``, ``y``, ``kind`` (lane the token died on), ``tick``
``goal_filled``  ``slot``, ``score``, ``tick``
``level_clear``  ``level``, ``score``, ``tick``
``progress``     ``row``, ``score``, ``tick``
``mode_changed`` ``old``, ``new`` (mode values)
``best_score``   ``best``
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from tick_crossing.session import Session
    from tick_crossing.types import TickContext

Handler = Callable[[str, dict[str, Any]], None]

LIFE_LOST = "life_lost"
GOAL_FILLED = "goal_filled"
LEVEL_CLEAR = "level_clear"
PROGRESS = "progress"
MODE_CHANGED = "mode_changed"
BEST_SCORE = "best_score"

SIGNALS = frozenset({LIFE_LOST, GOAL_FILLED, LEVEL_CLEAR, PROGRESS, MODE_CHANGED, BEST_SCORE})


class SignalBus:
    """Holds published game signals until ``flush``.

    Only the names in ``SIGNALS`` are accepted; a typo raises ValueError
    instead of silently never firing. A handler that publishes during a
    flush (a life loss that ends the game, say) queues its signal for the
    following flush, so callers drain with ``while bus.pending()``.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {name: [] for name in SIGNALS}
        self._pending: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, name: str, handler: Handler) -> None:
        self._check(name)
        self._handlers[name].append(handler)

    def publish(self, name: str, **data: Any) -> None:
        self._check(name)
        self._pending.append((name, data))

    def pending(self) -> int:
        return len(self._pending)

    def flush(self) -> None:
        batch, self._pending = self._pending, []
        for name, data in batch:
            for handler in list(self._handlers[name]):
                handler(name, data)

    @staticmethod
    def _check(name: str) -> None:
        if name not in SIGNALS:
            raise ValueError(f"Unknown signal {name!r}")


def make_signal_system(bus: SignalBus) -> Callable[[Session, TickContext], None]:
    """Return a system that dispatches every signal raised this tick."""

    def signal_system(session: Session, ctx: TickContext) -> None:
        while bus.pending():
            bus.flush()

    return signal_system
