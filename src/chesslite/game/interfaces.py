"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the GameController depends on these ABCs,
not on a concrete move store or suggestion service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesslite.core.move import Move


@dataclass(frozen=True, slots=True)
class Suggestion:
    """Reply of a move-suggestion service: either a move text or an error."""

    move: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.move)


class SuggestionError(RuntimeError):
    """The suggestion service could not be reached or replied garbage."""


class IMoveStore(ABC):
    """Interface for persisting the ordered move history."""

    @abstractmethod
    def save(self, moves: list[Move]) -> None:
        """Replace the stored history with *moves*."""

    @abstractmethod
    def load(self) -> list[Move]:
        """Stored history, oldest first (empty if nothing is stored)."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored history."""


class ISuggestionService(ABC):
    """Interface for a remote service proposing the next move."""

    @abstractmethod
    def suggest(self, fen: str) -> Suggestion:
        """Propose a move for the position *fen*.

        Raises:
            SuggestionError: the service could not be queried.
        """
