"""Move execution - pure board transform for one move."""

from __future__ import annotations

from typing import NamedTuple

from chesslite.core.board import Board
from chesslite.core.enums import CastlingSide, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Square

# side -> (rook home col, rook destination col)
ROOK_CASTLING_COLS: dict[CastlingSide, tuple[int, int]] = {
    CastlingSide.KINGSIDE: (7, 5),
    CastlingSide.QUEENSIDE: (0, 3),
}


class MoveResult(NamedTuple):
    """Outcome of :func:`execute_move`."""

    board: Board
    captured: Piece | None
    castling: CastlingSide | None


def castling_side(
    piece: Piece | None,
    from_sq: Square,
    to_sq: Square,
) -> CastlingSide | None:
    """Classify a king moving two files along its row as castling."""
    if piece is None or piece.piece_type != PieceType.KING:
        return None
    if from_sq.row != to_sq.row:
        return None
    col_diff = to_sq.col - from_sq.col
    if col_diff == 2:
        return CastlingSide.KINGSIDE
    if col_diff == -2:
        return CastlingSide.QUEENSIDE
    return None


def execute_move(board: Board, from_sq: Square, to_sq: Square) -> MoveResult:
    """Apply a move the caller has already validated.

    Returns the new board, the piece that stood on *to_sq* (if any) and the
    castling side when the move is a castling king move, in which case the
    rook is relocated as well. *board* itself is never modified.
    """
    piece = board[from_sq]
    if piece is None:
        return MoveResult(board, None, None)

    captured = board[to_sq]
    changes: dict[Square, Piece | None] = {from_sq: None, to_sq: piece}

    side = castling_side(piece, from_sq, to_sq)
    if side is not None:
        rook_from_col, rook_to_col = ROOK_CASTLING_COLS[side]
        row = from_sq.row
        changes[Square(row, rook_to_col)] = board[Square(row, rook_from_col)]
        changes[Square(row, rook_from_col)] = None

    return MoveResult(board.replace(changes), captured, side)
