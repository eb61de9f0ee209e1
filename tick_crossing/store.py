"""Best-score persistence."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class BestScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, score: int) -> None: ...


class MemoryStore:
    """Keeps the best score for the life of the process."""

    def __init__(self, best: int = 0) -> None:
        self.best = best

    def load(self) -> int:
        return self.best

    def save(self, score: int) -> None:
        self.best = score


class JsonFileStore:
    """Stores ``{"best": <int>}`` in a JSON file.

    A missing, unreadable, or malformed file loads as 0. Failed writes are
    logged and the caller keeps its in-memory value.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> int:
        if not self._path.exists():
            return 0
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("could not read best score from %s: %s", self._path, exc)
            return 0
        best = data.get("best") if isinstance(data, dict) else None
        if not isinstance(best, int) or isinstance(best, bool) or best < 0:
            logger.warning("ignoring malformed best score in %s", self._path)
            return 0
        return best

    def save(self, score: int) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps({"best": score}), encoding="utf-8")
        except OSError as exc:
            logger.warning("could not write best score to %s: %s", self._path, exc)
