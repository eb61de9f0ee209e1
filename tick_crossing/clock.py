"""Tick clock and fixed-timestep loop driver."""
from __future__ import annotations

import logging

from tick_crossing.types import TickContext

logger = logging.getLogger(__name__)


class Clock:
    def __init__(self, tick_seconds: float) -> None:
        if tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive")
        self._dt = tick_seconds
        self._tick_number = 0

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number


class FixedStepDriver:
    """Accumulates wall-clock time and reports how many ticks are due.

    At most ``max_steps`` ticks are released per call. Whole ticks beyond
    that are dropped so a stalled frame cannot snowball; the fractional
    remainder is kept for ``alpha``.
    """

    def __init__(self, tick_seconds: float, max_steps: int = 5) -> None:
        if tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive")
        if max_steps <= 0:
            raise ValueError("max_steps must be positive")
        self._dt = tick_seconds
        self._max_steps = max_steps
        self._accumulator = 0.0

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def max_steps(self) -> int:
        return self._max_steps

    @property
    def accumulator(self) -> float:
        return self._accumulator

    @property
    def alpha(self) -> float:
        """Progress toward the next tick, in [0, 1)."""
        return min(self._accumulator / self._dt, 1.0 - 1e-9)

    def advance(self, elapsed: float) -> int:
        """Add ``elapsed`` seconds and return the number of ticks to run."""
        if elapsed > 0:
            self._accumulator += elapsed
        due = int(self._accumulator // self._dt)
        steps = min(due, self._max_steps)
        self._accumulator -= due * self._dt
        if self._accumulator < 0:
            self._accumulator = 0.0
        if due > steps:
            logger.debug("dropped %d catch-up ticks", due - steps)
        return steps

    def reset(self) -> None:
        self._accumulator = 0.0
