"""Gambit: chess rules and a minimax opponent.

Quick start::

    from gambit import initialize_board, get_best_move

    board = initialize_board()
    move = get_best_move(board, "intermediate", "black")
"""

from gambit.api import (
    get_best_move,
    get_legal_moves,
    initialize_board,
    is_in_check,
    is_in_checkmate,
    is_stalemate,
)
from gambit.core import Board, Color, Move, Piece, PieceType
from gambit.engine import Difficulty

__all__ = [
    "Board",
    "Color",
    "Difficulty",
    "Move",
    "Piece",
    "PieceType",
    "get_best_move",
    "get_legal_moves",
    "initialize_board",
    "is_in_check",
    "is_in_checkmate",
    "is_stalemate",
]
