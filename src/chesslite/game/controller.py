"""GameController — the single owner of a game's state.

Coordinates: GameState, the move store and the suggestion service.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslite.core.enums import Color
from chesslite.core.errors import FenError
from chesslite.core.move import Move
from chesslite.core.notation import parse_san
from chesslite.core.types import Square, square_name
from chesslite.game.interfaces import IMoveStore, ISuggestionService, SuggestionError
from chesslite.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "GameState"], None]
PositionCallback = Callable[["GameState"], None]
ErrorCallback = Callable[[str], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_position_loaded: list[PositionCallback] = field(default_factory=list)
    on_error: list[ErrorCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates and applies moves, keeps the store in sync, notifies
    listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). Suggestions fetched in the background must be
    handed back to that thread before :meth:`execute_notation` is called.
    """

    __slots__ = ("_state", "_store", "_suggestions", "events")

    def __init__(
        self,
        store: IMoveStore | None = None,
        suggestions: ISuggestionService | None = None,
    ) -> None:
        self._state = GameState()
        self._store = store
        self._suggestions = suggestions
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def fen(self) -> str:
        return self._state.fen

    # ── Lifecycle ────────────────────────────────────────────────────────

    def restore(self) -> int:
        """Rebuild the game from the stored history; returns the move count."""
        if self._store is None:
            return 0
        moves = self._store.load()
        if moves:
            self._state.replay(moves)
            self._emit_position_loaded()
        return len(moves)

    def reset(self) -> None:
        """Start over from the initial position and forget the history."""
        self._state = GameState()
        if self._store is not None:
            self._store.clear()
        self._emit_position_loaded()

    def clear_history(self) -> None:
        """Forget the recorded moves without touching the board."""
        self._state.clear_history()
        if self._store is not None:
            self._store.clear()

    def load_fen(self, fen: str) -> bool:
        """Replace the position with *fen*. Returns False if it is malformed."""
        try:
            self._state.setup(fen.strip())
        except FenError as exc:
            _LOGGER.info("FEN rejected: %s", exc)
            self._emit_error(f"Invalid FEN: {exc}")
            return False
        if self._store is not None:
            self._store.clear()
        self._emit_position_loaded()
        return True

    # ── Moves ────────────────────────────────────────────────────────────

    def valid_moves(self, sq: Square) -> set[Square]:
        """Destinations to highlight for the piece on *sq*."""
        return self._state.valid_moves(sq)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Submit a move. Returns True if legal and applied."""
        if not self._state.is_valid_move(from_sq, to_sq):
            _LOGGER.info(
                "Rejected move %s-%s for %s",
                square_name(from_sq),
                square_name(to_sq),
                self._state.side_to_move,
            )
            return False

        move = self._state.apply_move(from_sq, to_sq)
        if self._store is not None:
            self._store.save(self._state.moves)
        self._emit_move(move)
        return True

    def execute_notation(self, text: str, color: Color | None = None) -> bool:
        """Play a move given as algebraic text for *color* (default: side
        to move). Returns True if it was understood and applied."""
        color = self._state.side_to_move if color is None else color
        if color != self._state.side_to_move:
            self._emit_error(f"It is not {color}'s turn")
            return False

        resolved = parse_san(self._state.board, text, color, self._state.castling)
        if resolved is None:
            self._emit_error(f"Invalid move: {text.strip()}")
            return False
        if not self.submit_move(resolved.from_sq, resolved.to_sq):
            self._emit_error(f"Invalid move: {text.strip()}")
            return False
        return True

    def request_suggestion(self) -> bool:
        """Ask the suggestion service for a move and play it."""
        if self._suggestions is None:
            self._emit_error("No suggestion service configured")
            return False
        try:
            suggestion = self._suggestions.suggest(self.fen)
        except SuggestionError as exc:
            _LOGGER.warning("Suggestion failed: %s", exc)
            self._emit_error(str(exc))
            return False
        if suggestion.error is not None or not suggestion.move:
            self._emit_error(suggestion.error or "No move suggested")
            return False
        return self.execute_notation(suggestion.move)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_position_loaded(self) -> None:
        for cb in self.events.on_position_loaded:
            cb(self._state)

    def _emit_error(self, message: str) -> None:
        for cb in self.events.on_error:
            cb(message)
