"""FEN parsing and serialization.

Only piece placement, side to move and castling rights are modelled; the
en-passant and clock fields are written as the fixed literal ``- 0 1`` and
ignored when reading.
"""

from __future__ import annotations

import logging

from chesslite.core.board import Board
from chesslite.core.enums import CastlingRights, Color
from chesslite.core.errors import FenError
from chesslite.core.piece import Piece
from chesslite.core.position import Position

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_UNMODELLED_FIELDS = "- 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Raises:
        FenError: the placement field does not describe an 8x8 board.
    """
    parts = fen.split()
    if not parts:
        raise FenError(f"Invalid FEN (empty): {fen!r}")

    # 1. Piece placement
    ranks = parts[0].split("/")
    if len(ranks) != 8:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    grid: list[tuple[Piece | None, ...]] = []
    for rank_text in ranks:
        cells: list[Piece | None] = []
        for ch in rank_text:
            if ch in "12345678":
                cells.extend([None] * int(ch))
            else:
                try:
                    cells.append(Piece.from_char(ch))
                except ValueError:
                    raise FenError(
                        f"Invalid FEN character {ch!r}: {fen!r}"
                    ) from None
            if len(cells) > 8:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        if len(cells) != 8:
            raise FenError(f"Invalid FEN rank width: {fen!r}")
        grid.append(tuple(cells))

    # 2. Side to move
    side = Color.BLACK if len(parts) > 1 and parts[1] == "b" else Color.WHITE

    # 3. Castling
    castling = CastlingRights.NONE
    if len(parts) > 2:
        for ch, right in _CASTLING_CHARS:
            if ch in parts[2]:
                castling |= right

    # Remaining fields (en passant, clocks) are accepted as-is.
    return Position(Board(tuple(grid)), side, castling)


def parse_fen(fen: str) -> Position | None:
    """Lenient :func:`position_from_fen`: ``None`` instead of an exception."""
    try:
        return position_from_fen(fen)
    except FenError as exc:
        _LOGGER.debug("Rejected FEN: %s", exc)
        return None


def castling_to_fen(castling: CastlingRights) -> str:
    """``KQkq`` subset in fixed order, or ``-``."""
    text = "".join(ch for ch, right in _CASTLING_CHARS if castling & right)
    return text or "-"


def board_to_fen(board: Board) -> str:
    """Piece-placement field, rank 8 first."""
    rows: list[str] = []
    for cells in board.rows:
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def position_to_fen(
    board: Board,
    side_to_move: Color,
    castling: CastlingRights,
) -> str:
    """Serialise a board, side and castling rights to FEN."""
    side_str = "w" if side_to_move == Color.WHITE else "b"
    return (
        f"{board_to_fen(board)} {side_str} {castling_to_fen(castling)} "
        f"{_UNMODELLED_FIELDS}"
    )


def fen_of(position: Position) -> str:
    """:func:`position_to_fen` for a :class:`Position` value."""
    return position_to_fen(position.board, position.side_to_move, position.castling)
