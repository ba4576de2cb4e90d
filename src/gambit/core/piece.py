"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, PieceType

# Upper-case letter per type; FEN lower-cases it for black, notation drops it
# for pawns.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_TYPES_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

# Unicode chess glyphs run king..pawn from U+2654 (white) then U+265A (black).
_WHITE_KING_GLYPH = 0x2654
_GLYPH_ORDER: tuple[PieceType, ...] = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece type.

    Pieces have no identity beyond their square: moving one copies the value
    to the destination and clears the origin.
    """

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        char = _LETTERS[self.piece_type]
        return char if self.color == Color.WHITE else char.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        piece_type = _TYPES_BY_LETTER.get(char.upper())
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, piece_type)

    @property
    def symbol(self) -> str:
        """Board glyph, e.g. ♞ for a black knight."""
        offset = _GLYPH_ORDER.index(self.piece_type)
        if self.color == Color.BLACK:
            offset += len(_GLYPH_ORDER)
        return chr(_WHITE_KING_GLYPH + offset)

    @property
    def letter(self) -> str:
        """Move-notation letter; empty for pawns."""
        if self.piece_type == PieceType.PAWN:
            return ""
        return _LETTERS[self.piece_type]
