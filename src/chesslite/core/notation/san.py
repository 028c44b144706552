"""Algebraic move notation: generation and parsing.

The dialect is a simplified SAN: no check/mate suffixes and no
disambiguation are ever written. Parsing accepts both, and uses the move
generator to find which piece a move refers to.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from chesslite.core.board import Board
from chesslite.core.enums import CastlingRights, CastlingSide, Color, PieceType
from chesslite.core.errors import IllegalMoveError, NotationError, SanSyntaxError
from chesslite.core.move import Move
from chesslite.core.move_generator import KING_HOME_COL, MoveGenerator
from chesslite.core.types import FILES, Square, file_char, rank_char, square_name

_LOGGER = logging.getLogger(__name__)

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}

_CASTLING_TOKENS: dict[str, CastlingSide] = {
    "O-O": CastlingSide.KINGSIDE,
    "0-0": CastlingSide.KINGSIDE,
    "O-O-O": CastlingSide.QUEENSIDE,
    "0-0-0": CastlingSide.QUEENSIDE,
}
_CASTLING_KING_DEST: dict[CastlingSide, int] = {
    CastlingSide.KINGSIDE: 6,
    CastlingSide.QUEENSIDE: 2,
}

# piece, disambiguation file, disambiguation rank, capture, target file,
# target rank, promotion (accepted, ignored)
_SAN_RE = re.compile(r"^([KQRBN])?([a-h])?([1-8])?(x)?([a-h])([1-8])(=[QRBN])?$")


class SanMove(NamedTuple):
    """Origin and destination a move text resolved to."""

    from_sq: Square
    to_sq: Square


def piece_letter(piece_type: PieceType) -> str:
    """SAN letter for a piece type (empty for pawns)."""
    return _SAN_PIECE.get(piece_type, "")


# ── Generation ───────────────────────────────────────────────────────────────


def move_to_san(move: Move) -> str:
    """Notation for an executed *move* record."""
    if move.castling == CastlingSide.KINGSIDE:
        return "O-O"
    if move.castling == CastlingSide.QUEENSIDE:
        return "O-O-O"

    destination = square_name(move.to_sq)
    if move.piece.piece_type == PieceType.PAWN and move.captured is not None:
        return f"{file_char(move.from_sq.col)}x{destination}"

    capture = "x" if move.captured is not None else ""
    return f"{piece_letter(move.piece.piece_type)}{capture}{destination}"


# ── Parsing ──────────────────────────────────────────────────────────────────


def _clean(san: str) -> str:
    return san.strip().rstrip("+#!?")


def _castling_squares(
    side: CastlingSide,
    color: Color,
    castling: CastlingRights,
) -> SanMove:
    if not castling & CastlingRights.for_side(color, side):
        raise IllegalMoveError(f"{color} may no longer castle {side}")
    row = color.home_row
    return SanMove(
        Square(row, KING_HOME_COL),
        Square(row, _CASTLING_KING_DEST[side]),
    )


def san_candidates(
    board: Board,
    san: str,
    color: Color,
    castling: CastlingRights,
) -> list[SanMove]:
    """Every move of *color* that *san* could denote, in row-major order.

    Raises:
        SanSyntaxError: *san* does not match the move grammar.
    """
    clean = _clean(san)

    side = _CASTLING_TOKENS.get(clean)
    if side is not None:
        try:
            return [_castling_squares(side, color, castling)]
        except IllegalMoveError:
            return []

    match = _SAN_RE.match(clean)
    if match is None:
        raise SanSyntaxError(f"Unrecognised move text: {san!r}")

    piece_char, from_file, from_rank, _capture, to_file, to_rank, _promo = (
        match.groups()
    )
    piece_type = _SAN_PIECE_REV[piece_char] if piece_char else PieceType.PAWN
    to_sq = Square(8 - int(to_rank), FILES.index(to_file))

    gen = MoveGenerator(board, castling)
    candidates: list[SanMove] = []
    for sq in board.pieces(color, piece_type):
        if from_file and file_char(sq.col) != from_file:
            continue
        if from_rank and rank_char(sq.row) != from_rank:
            continue
        if gen.can_move(sq, to_sq):
            candidates.append(SanMove(sq, to_sq))
    return candidates


def san_to_squares(
    board: Board,
    san: str,
    color: Color,
    castling: CastlingRights,
) -> SanMove:
    """Resolve *san* to the move it denotes for *color*.

    When several pieces fit, the first one in row-major scan order wins.

    Raises:
        SanSyntaxError: *san* does not match the move grammar.
        IllegalMoveError: no piece of *color* can make the move (or the
            castling right is gone).
    """
    clean = _clean(san)
    side = _CASTLING_TOKENS.get(clean)
    if side is not None:
        return _castling_squares(side, color, castling)

    candidates = san_candidates(board, san, color, castling)
    if not candidates:
        raise IllegalMoveError(f"Illegal move: {san}")
    if len(candidates) > 1:
        _LOGGER.warning(
            "Ambiguous move %r for %s, using %s of %s",
            san,
            color,
            square_name(candidates[0].from_sq),
            [square_name(c.from_sq) for c in candidates],
        )
    return candidates[0]


def parse_san(
    board: Board,
    san: str,
    color: Color,
    castling: CastlingRights,
) -> SanMove | None:
    """Lenient :func:`san_to_squares`: ``None`` instead of an exception."""
    try:
        return san_to_squares(board, san, color, castling)
    except NotationError as exc:
        _LOGGER.debug("Rejected move text: %s", exc)
        return None
