"""Core rules engine — pure chess logic with zero external dependencies.

Quick start::

    from chesslite.core import Board, CastlingRights, Color, generate_moves, parse_san
    from chesslite.core.types import E2

    board = Board.initial()
    generate_moves(board, E2)                      # {e3, e4}
    parse_san(board, "Nf3", Color.WHITE, CastlingRights.ALL)
"""

from chesslite.core.board import Board
from chesslite.core.castling import update_castling_rights
from chesslite.core.enums import CastlingRights, CastlingSide, Color, PieceType
from chesslite.core.errors import (
    FenError,
    IllegalMoveError,
    NotationError,
    SanSyntaxError,
)
from chesslite.core.executor import MoveResult, castling_side, execute_move
from chesslite.core.move import Move
from chesslite.core.move_generator import MoveGenerator, generate_moves, is_valid_move
from chesslite.core.notation import (
    STARTING_FEN,
    SanMove,
    move_to_san,
    parse_fen,
    parse_san,
    position_from_fen,
    position_to_fen,
)
from chesslite.core.piece import Piece
from chesslite.core.position import Position
from chesslite.core.types import Square, is_on_board, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "CastlingSide",
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Position",
    "SanMove",
    # Rules
    "castling_side",
    "execute_move",
    "generate_moves",
    "is_valid_move",
    "update_castling_rights",
    # Notation
    "STARTING_FEN",
    "move_to_san",
    "parse_fen",
    "parse_san",
    "position_from_fen",
    "position_to_fen",
    # Errors
    "FenError",
    "IllegalMoveError",
    "NotationError",
    "SanSyntaxError",
]
