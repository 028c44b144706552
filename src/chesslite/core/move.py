"""Move record - one committed move as kept in the game history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chesslite.core.enums import CastlingSide
from chesslite.core.piece import Piece
from chesslite.core.types import Square, is_on_board, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a single executed move.

    ``piece`` is the piece as it stood before the move and ``captured`` the
    piece that occupied the destination, if any.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    notation: str = ""
    castling: CastlingSide | None = None
    timestamp: float = 0.0

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.notation or self.uci

    @property
    def uci(self) -> str:
        """Long-algebraic from/to text, e.g. 'e2e4'."""
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    # ── Serialisation ────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation used by the move stores."""
        return {
            "from": {"row": self.from_sq.row, "col": self.from_sq.col},
            "to": {"row": self.to_sq.row, "col": self.to_sq.col},
            "piece": self.piece.to_dict(),
            "captured": self.captured.to_dict() if self.captured else None,
            "notation": self.notation,
            "castling": self.castling.value if self.castling else None,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Move:
        """Inverse of :meth:`to_dict`; raises ``ValueError`` on bad records."""
        try:
            from_sq = Square(int(data["from"]["row"]), int(data["from"]["col"]))
            to_sq = Square(int(data["to"]["row"]), int(data["to"]["col"]))
            if not (is_on_board(*from_sq) and is_on_board(*to_sq)):
                raise ValueError(f"Move record square off the board: {data!r}")
            captured = data.get("captured")
            castling = data.get("castling")
            return cls(
                from_sq=from_sq,
                to_sq=to_sq,
                piece=Piece.from_dict(data["piece"]),
                captured=Piece.from_dict(captured) if captured else None,
                notation=str(data.get("notation", "")),
                castling=CastlingSide(castling) if castling else None,
                timestamp=float(data.get("timestamp", 0.0)),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Invalid move record: {data!r}") from exc
