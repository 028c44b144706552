"""Move-history persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from chesslite.config import Settings, default_storage_path
from chesslite.core.move import Move
from chesslite.game.interfaces import IMoveStore

_LOGGER = logging.getLogger(__name__)


class MemoryMoveStore(IMoveStore):
    """Keeps the history in memory only (tests, throwaway games)."""

    __slots__ = ("_moves",)

    def __init__(self, moves: list[Move] | None = None) -> None:
        self._moves: list[Move] = list(moves or [])

    def save(self, moves: list[Move]) -> None:
        self._moves = list(moves)

    def load(self) -> list[Move]:
        return list(self._moves)

    def clear(self) -> None:
        self._moves = []


class JsonMoveStore(IMoveStore):
    """Stores the history as a JSON array of move records in one file.

    A missing, unreadable or corrupt file loads as an empty history; a
    failed write is logged and the previous file is left in place.
    """

    __slots__ = ("_path",)

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @classmethod
    def from_settings(cls, settings: Settings) -> JsonMoveStore:
        return cls(settings.storage_path or default_storage_path())

    @property
    def path(self) -> Path:
        return self._path

    def save(self, moves: list[Move]) -> None:
        payload = json.dumps([m.to_dict() for m in moves], indent=2)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            _LOGGER.error("Error saving moves to %s: %s", self._path, exc)

    def load(self) -> list[Move]:
        if not self._path.is_file():
            return []
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            _LOGGER.error("Error loading moves from %s: %s", self._path, exc)
            return []
        if not isinstance(raw, list):
            _LOGGER.error("Error loading moves from %s: not a list", self._path)
            return []
        try:
            return [Move.from_dict(item) for item in raw]
        except ValueError as exc:
            _LOGGER.error("Error loading moves from %s: %s", self._path, exc)
            return []

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
