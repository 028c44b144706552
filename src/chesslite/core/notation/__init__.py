"""Notation package: FEN / algebraic move text / PGN movetext."""

from chesslite.core.notation.fen import (
    STARTING_FEN,
    fen_of,
    parse_fen,
    position_from_fen,
    position_to_fen,
)
from chesslite.core.notation.pgn import (
    move_pairs,
    movetext_from_sans,
    sans_from_movetext,
)
from chesslite.core.notation.san import (
    SanMove,
    move_to_san,
    parse_san,
    san_candidates,
    san_to_squares,
)

__all__ = [
    "STARTING_FEN",
    "SanMove",
    "fen_of",
    "parse_fen",
    "position_from_fen",
    "position_to_fen",
    "move_to_san",
    "parse_san",
    "san_candidates",
    "san_to_squares",
    "move_pairs",
    "movetext_from_sans",
    "sans_from_movetext",
]
