"""Pseudo-legal destination generation for a single piece."""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.enums import CastlingRights, CastlingSide, Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Square, is_on_board

Offsets = tuple[tuple[int, int], ...]

KNIGHT_OFFSETS: Offsets = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: Offsets = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: Offsets = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: Offsets = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: Offsets = BISHOP_DIRS + ROOK_DIRS

KING_HOME_COL = 4

# side -> (rook corner col, king destination col)
_CASTLING_COLS: dict[CastlingSide, tuple[int, int]] = {
    CastlingSide.KINGSIDE: (7, 6),
    CastlingSide.QUEENSIDE: (0, 2),
}


def pawn_direction(color: Color) -> int:
    """Row delta of a pawn step (white moves toward row 0)."""
    return -1 if color == Color.WHITE else 1


def pawn_start_row(color: Color) -> int:
    return 6 if color == Color.WHITE else 1


class MoveGenerator:
    """Generates pseudo-legal destinations on a fixed board snapshot.

    No check detection is done: a destination may leave the mover's own
    king attacked. Castling candidates are only produced when *castling*
    rights are supplied.
    """

    __slots__ = ("_board", "_castling")

    def __init__(self, board: Board, castling: CastlingRights | None = None) -> None:
        self._board = board
        self._castling = castling

    # -- Public API ---------------------------------------------------------

    def destinations(self, sq: Square) -> set[Square]:
        """All squares the piece on *sq* may move to (empty if no piece)."""
        piece = self._board[sq]
        if piece is None:
            return set()

        moves: set[Square] = set()
        piece_type = piece.piece_type
        if piece_type == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif piece_type == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, KNIGHT_OFFSETS, moves)
        elif piece_type == PieceType.BISHOP:
            self._gen_sliding(sq, piece.color, BISHOP_DIRS, moves)
        elif piece_type == PieceType.ROOK:
            self._gen_sliding(sq, piece.color, ROOK_DIRS, moves)
        elif piece_type == PieceType.QUEEN:
            self._gen_sliding(sq, piece.color, QUEEN_DIRS, moves)
        elif piece_type == PieceType.KING:
            self._gen_steps(sq, piece.color, KING_OFFSETS, moves)
            self._gen_castling(sq, piece.color, moves)
        else:
            raise AssertionError(f"Unhandled piece type: {piece_type!r}")
        return moves

    def can_move(self, from_sq: Square, to_sq: Square) -> bool:
        return to_sq in self.destinations(from_sq)

    # -- Piece-specific generators (private) -------------------------------

    def _is_enemy(self, sq: Square, color: Color) -> bool:
        target = self._board[sq]
        return target is not None and target.color != color

    def _gen_pawn(self, sq: Square, color: Color, moves: set[Square]) -> None:
        board = self._board
        direction = pawn_direction(color)

        one_step = sq.offset(direction, 0)
        if is_on_board(*one_step) and board.is_empty(one_step):
            moves.add(one_step)
            if sq.row == pawn_start_row(color):
                two_step = sq.offset(2 * direction, 0)
                if board.is_empty(two_step):
                    moves.add(two_step)

        for d_col in (-1, 1):
            cap_sq = sq.offset(direction, d_col)
            if is_on_board(*cap_sq) and self._is_enemy(cap_sq, color):
                moves.add(cap_sq)

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: Offsets,
        moves: set[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if not is_on_board(*to_sq):
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                moves.add(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: Offsets,
        moves: set[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in directions:
            to_sq = sq.offset(d_row, d_col)
            while is_on_board(*to_sq):
                target = board[to_sq]
                if target is None:
                    moves.add(to_sq)
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if target.color != color:
                    moves.add(to_sq)
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: set[Square]) -> None:
        if self._castling is None:
            return
        row = color.home_row
        if king_sq != Square(row, KING_HOME_COL):
            return

        board = self._board
        rook = Piece(color, PieceType.ROOK)
        for side, (rook_col, dest_col) in _CASTLING_COLS.items():
            if not self._castling & CastlingRights.for_side(color, side):
                continue
            if board[Square(row, rook_col)] != rook:
                continue
            low, high = sorted((KING_HOME_COL, rook_col))
            if all(board.is_empty(Square(row, c)) for c in range(low + 1, high)):
                moves.add(Square(row, dest_col))


def generate_moves(
    board: Board,
    sq: Square,
    castling: CastlingRights | None = None,
) -> set[Square]:
    """Pseudo-legal destinations for the piece on *sq*."""
    return MoveGenerator(board, castling).destinations(sq)


def is_valid_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    turn: Color,
    castling: CastlingRights | None = None,
) -> bool:
    """Whether the side *turn* may move the piece on *from_sq* to *to_sq*."""
    piece = board[from_sq]
    if piece is None or piece.color != turn:
        return False
    return MoveGenerator(board, castling).can_move(from_sq, to_sq)
