"""Game state record — board, turn, rights and move history."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from chesslite.core.board import Board
from chesslite.core.castling import update_castling_rights
from chesslite.core.enums import CastlingRights, Color
from chesslite.core.executor import execute_move
from chesslite.core.move import Move
from chesslite.core.move_generator import generate_moves, is_valid_move
from chesslite.core.notation import (
    STARTING_FEN,
    move_to_san,
    position_from_fen,
    position_to_fen,
)
from chesslite.core.piece import Piece
from chesslite.core.types import Square


@dataclass
class GameState:
    """Everything one game needs between moves.

    Pure data and logic, without I/O or threading. Legality is the
    caller's job; see :meth:`is_valid_move`.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    moves: list[Move] = field(default_factory=list)
    captured_by_white: list[Piece] = field(default_factory=list)
    captured_by_black: list[Piece] = field(default_factory=list)
    start_fen: str = STARTING_FEN

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Reset to the starting position or to *fen*.

        Raises:
            FenError: *fen* is malformed; the state is left untouched.
        """
        text = STARTING_FEN if fen is None else fen
        position = position_from_fen(text)
        self.start_fen = text
        self.board = position.board
        self.side_to_move = position.side_to_move
        self.castling = position.castling
        self.moves = []
        self.captured_by_white = []
        self.captured_by_black = []

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(
        self,
        from_sq: Square,
        to_sq: Square,
        timestamp: float | None = None,
    ) -> Move:
        """Apply a validated move and return its history record."""
        piece = self.board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        result = execute_move(self.board, from_sq, to_sq)
        move = Move(
            from_sq=from_sq,
            to_sq=to_sq,
            piece=piece,
            captured=result.captured,
            castling=result.castling,
            timestamp=time.time() if timestamp is None else timestamp,
        )
        move = replace(move, notation=move_to_san(move))

        self.board = result.board
        self.castling = update_castling_rights(self.castling, piece, from_sq)
        self.side_to_move = self.side_to_move.opposite
        self.moves.append(move)
        self._record_capture(piece, result.captured)
        return move

    def replay(self, moves: Iterable[Move]) -> None:
        """Rebuild the state by replaying *moves* from the initial position.

        Stored records are trusted: boards and rights are recomputed from
        their squares, the records themselves are kept as they are.
        """
        board = Board.initial()
        castling = CastlingRights.ALL
        history: list[Move] = []
        by_white: list[Piece] = []
        by_black: list[Piece] = []

        for move in moves:
            result = execute_move(board, move.from_sq, move.to_sq)
            board = result.board
            castling = update_castling_rights(castling, move.piece, move.from_sq)
            if result.captured is not None:
                if move.piece.color == Color.WHITE:
                    by_white.append(result.captured)
                else:
                    by_black.append(result.captured)
            history.append(move)

        self.start_fen = STARTING_FEN
        self.board = board
        self.castling = castling
        self.moves = history
        self.captured_by_white = by_white
        self.captured_by_black = by_black
        self.side_to_move = Color.WHITE if len(history) % 2 == 0 else Color.BLACK

    def clear_history(self) -> None:
        """Drop the recorded moves but keep the current position."""
        self.moves = []

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def fen(self) -> str:
        return position_to_fen(self.board, self.side_to_move, self.castling)

    @property
    def ply_count(self) -> int:
        """Number of half-moves recorded."""
        return len(self.moves)

    @property
    def notations(self) -> list[str]:
        return [m.notation for m in self.moves]

    def valid_moves(self, sq: Square) -> set[Square]:
        """Destinations for the piece on *sq* under the current rights."""
        return generate_moves(self.board, sq, self.castling)

    def is_valid_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the side to move may play *from_sq* → *to_sq*."""
        return is_valid_move(
            self.board, from_sq, to_sq, self.side_to_move, self.castling
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _record_capture(self, mover: Piece, captured: Piece | None) -> None:
        if captured is None:
            return
        if mover.color == Color.WHITE:
            self.captured_by_white.append(captured)
        else:
            self.captured_by_black.append(captured)
