"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from gambit.core import Board, legal_moves, is_in_check, Color

    board = Board.initial()
    print(legal_moves(board, 6, 4))   # [(5, 4), (4, 4)]
    print(is_in_check(board, Color.WHITE))
"""

from gambit.core.board import Board
from gambit.core.enums import Color, GameResult, PieceType
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator, pseudo_legal_moves
from gambit.core.notation import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    move_to_notation,
)
from gambit.core.piece import Piece
from gambit.core.rules import (
    Rules,
    all_legal_moves,
    game_result,
    has_legal_move,
    is_checkmate,
    is_in_check,
    is_stalemate,
    legal_moves,
)
from gambit.core.types import Square, is_on_board, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Move generation / legality
    "all_legal_moves",
    "game_result",
    "has_legal_move",
    "is_checkmate",
    "is_in_check",
    "is_stalemate",
    "legal_moves",
    "pseudo_legal_moves",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "move_to_notation",
]
