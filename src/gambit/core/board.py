"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from gambit.core.enums import Color, PieceType
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import Square

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
    """8x8 grid of ``Piece | None`` indexed by ``(row, col)``.

    Row 0 is black's back rank. A board handed to the rules or the engine is
    never mutated by them; exploratory moves go through :meth:`with_move`.
    """

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._rows[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        self._rows[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        row, col = sq
        return self._rows[row][col] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Every occupied square with its piece, in row-major scan order."""
        for row, pieces in enumerate(self._rows):
            for col, piece in enumerate(pieces):
                if piece is not None:
                    yield (row, col), piece

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, in row-major scan order."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def count(self, color: Color) -> int:
        return len(self.pieces(color))

    def king_square(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or None if it is missing."""
        king = Piece(color, PieceType.KING)
        for sq, piece in self.occupied():
            if piece == king:
                return sq
        return None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._rows = [row.copy() for row in self._rows]
        return b

    def with_move(self, move: Move) -> Board:
        """New board with the origin cleared and the destination filled.

        No other side effects: no promotion, castling or en passant.
        """
        b = self.copy()
        b[move.to_sq] = self[move.from_sq]
        b[move.from_sq] = None
        return b

    def clear(self) -> None:
        self._rows = [[None] * 8 for _ in range(8)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b[(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[(6, col)] = Piece(Color.WHITE, PieceType.PAWN)

        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.BLACK, pt)
            b[(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return self._render(str)

    def __str__(self) -> str:
        """Diagram with piece glyphs, rank 8 at the top."""
        return self._render(lambda piece: piece.symbol)

    def _render(self, cell: Callable[[Piece], str]) -> str:
        rows: list[str] = []
        for row, pieces in enumerate(self._rows):
            cells = [cell(p) if p else "." for p in pieces]
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
