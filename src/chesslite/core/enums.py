"""Core enumerations and flags for the rules engine."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_row(self) -> int:
        """Board row of this side's back rank (row 0 is rank 8)."""
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingSide(Enum):
    """Which rook a castling move uses."""

    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"

    def __str__(self) -> str:
        return self.value


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, side: CastlingSide) -> CastlingRights:
        """The single flag for *color* castling on *side*."""
        if color == Color.WHITE:
            if side == CastlingSide.KINGSIDE:
                return cls.WHITE_KINGSIDE
            return cls.WHITE_QUEENSIDE
        if side == CastlingSide.KINGSIDE:
            return cls.BLACK_KINGSIDE
        return cls.BLACK_QUEENSIDE

    @classmethod
    def for_color(cls, color: Color) -> CastlingRights:
        """Both flags of *color*."""
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH
