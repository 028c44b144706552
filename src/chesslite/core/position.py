"""Position - board plus side to move and castling rights."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.board import Board
from chesslite.core.enums import CastlingRights, Color


@dataclass(frozen=True, slots=True)
class Position:
    """The part of a game state that FEN encodes.

    En-passant and the move clocks are not modelled.
    """

    board: Board
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.NONE

    @classmethod
    def initial(cls) -> Position:
        return cls(Board.initial(), Color.WHITE, CastlingRights.ALL)
