"""Static position evaluation (white-positive centipawns)."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 300,
    PieceType.BISHOP: 300,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 10_000,
}

# Indexed by the pawn's own (row, col) for both colors; row 0 is rank 8.
PAWN_POSITION_BONUS: tuple[tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0, 0, 0, 0),
    (50, 50, 50, 50, 50, 50, 50, 50),
    (10, 10, 20, 30, 30, 20, 10, 10),
    (5, 5, 10, 25, 25, 10, 5, 5),
    (0, 0, 0, 20, 20, 0, 0, 0),
    (5, -5, -10, 0, 0, -10, -5, 5),
    (5, 10, 10, -20, -20, 10, 10, 5),
    (0, 0, 0, 0, 0, 0, 0, 0),
)


def evaluate(board: Board) -> int:
    """Material plus pawn placement; positive favours white."""
    score = 0
    for (row, col), piece in board.occupied():
        val = PIECE_VALUES[piece.piece_type]
        if piece.piece_type == PieceType.PAWN:
            val += PAWN_POSITION_BONUS[row][col]
        score += val if piece.color == Color.WHITE else -val
    return score


def material_balance(board: Board) -> int:
    """Material term of :func:`evaluate` alone."""
    score = 0
    for _, piece in board.occupied():
        val = PIECE_VALUES[piece.piece_type]
        score += val if piece.color == Color.WHITE else -val
    return score


def score_to_pawns(score: int) -> float:
    """Centipawns → pawns, rounded to one decimal for display."""
    return round(score / 100, 1)
