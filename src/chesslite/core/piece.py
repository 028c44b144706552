"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.enums import Color, PieceType

_TYPE_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

# (Color, PieceType) -> FEN character; white is uppercase
_FEN_CHARS: dict[tuple[Color, PieceType], str] = {
    (color, ptype): ch.upper() if color == Color.WHITE else ch
    for ptype, ch in _TYPE_CHARS.items()
    for color in Color
}
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    ch: key for key, ch in _FEN_CHARS.items()
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A coloured piece. Hashable, compared by value."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a FEN letter, e.g. 'n' is a black knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    # ── Persistence ──────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, str]:
        return {"type": self.piece_type.name.lower(), "color": str(self.color)}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> Piece:
        try:
            return cls(Color[data["color"].upper()], PieceType[data["type"].upper()])
        except (KeyError, AttributeError, TypeError):
            raise ValueError(f"Invalid piece record: {data!r}") from None
