"""Input commands and synchronous command routing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Move:
    dx: int
    dy: int


UP = Move(0, -1)
DOWN = Move(0, 1)
LEFT = Move(-1, 0)
RIGHT = Move(1, 0)


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Resume:
    pass


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class Restart:
    pass


class CommandRouter:
    """Routes commands to typed handlers as soon as they arrive.

    One handler per command class, dispatched by type. Handlers return
    True to accept or False to reject. Nothing is queued: a rejected
    command is dropped.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Callable[[Any], bool]] = {}

    def handle(self, cmd_type: type[Any], handler: Callable[[Any], bool]) -> None:
        """Register a handler for a command type. Later calls overwrite."""
        self._handlers[cmd_type] = handler

    def handles(self, cmd_type: type[Any]) -> bool:
        return cmd_type in self._handlers

    def dispatch(self, cmd: Any) -> bool:
        """Run the handler for ``cmd``. Raises TypeError if none is registered."""
        handler = self._handlers.get(type(cmd))
        if handler is None:
            raise TypeError(f"No handler registered for {type(cmd).__qualname__}")
        return handler(cmd)
