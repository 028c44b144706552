"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import FILES, Square

Grid = tuple[tuple[Piece | None, ...], ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 8x8 board value.

    Indexed by :class:`Square`; every change goes through :meth:`replace`,
    which returns a new board and leaves this one untouched.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Grid | None = None) -> None:
        if grid is None:
            grid = tuple((None,) * 8 for _ in range(8))
        if len(grid) != 8 or any(len(row) != 8 for row in grid):
            raise ValueError("Board grid must be 8x8")
        self._grid: Grid = tuple(tuple(row) for row in grid)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.col] is None

    @property
    def rows(self) -> Grid:
        """The raw grid, row 0 (rank 8) first."""
        return self._grid

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, in row-major order."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield Square(row, col), piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*, row-major."""
        return [
            sq
            for sq, piece in self.squares()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.squares() if piece.color == color]

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """Return a copy with the given squares set (``None`` clears)."""
        grid = [list(row) for row in self._grid]
        for sq, piece in changes.items():
            grid[sq.row][sq.col] = piece
        return Board(tuple(tuple(row) for row in grid))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        for col, pt in enumerate(_BACK_RANK):
            grid[0][col] = Piece(Color.BLACK, pt)
            grid[1][col] = Piece(Color.BLACK, PieceType.PAWN)
            grid[6][col] = Piece(Color.WHITE, PieceType.PAWN)
            grid[7][col] = Piece(Color.WHITE, pt)
        return cls(tuple(tuple(row) for row in grid))

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __hash__(self) -> int:
        return hash(self._grid)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._grid):
            text = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{8 - row} {text}")
        rows.append("  " + " ".join(FILES))
        return "\n".join(rows)
