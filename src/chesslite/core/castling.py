"""Castling-rights bookkeeping."""

from __future__ import annotations

from chesslite.core.enums import CastlingRights, CastlingSide, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Square

_ROOK_HOME_COLS: dict[int, CastlingSide] = {
    7: CastlingSide.KINGSIDE,
    0: CastlingSide.QUEENSIDE,
}


def update_castling_rights(
    rights: CastlingRights,
    piece: Piece,
    from_sq: Square,
) -> CastlingRights:
    """Rights after *piece* moved away from *from_sq*.

    A king move clears both of its side's flags, whatever the origin. A rook
    leaving its own home corner clears that corner's flag. Flags are only
    ever cleared, never set.
    """
    color = piece.color
    if piece.piece_type == PieceType.KING:
        return rights & ~CastlingRights.for_color(color)

    if piece.piece_type == PieceType.ROOK and from_sq.row == color.home_row:
        side = _ROOK_HOME_COLS.get(from_sq.col)
        if side is not None:
            return rights & ~CastlingRights.for_side(color, side)

    return rights
