"""Entry points used by the presentation layer.

Every function is a pure query on the board it is given; none of them
mutates that board or remembers anything between calls.
"""

from __future__ import annotations

import random

from gambit.core import rules
from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.move import Move
from gambit.core.types import Square
from gambit.engine.minimax import choose_move
from gambit.engine.search import Difficulty


def initialize_board() -> Board:
    """Standard starting position; white on rows 6 and 7, black on rows 0 and 1."""
    return Board.initial()


def get_legal_moves(board: Board, row: int, col: int) -> list[Square]:
    """Destinations for the piece on (row, col); ``[]`` for an empty square."""
    return rules.legal_moves(board, row, col)


def is_in_check(board: Board, color: Color | str) -> bool:
    return rules.is_in_check(board, Color.parse(color))


def is_in_checkmate(board: Board, color: Color | str) -> bool:
    return rules.is_checkmate(board, Color.parse(color))


def is_stalemate(board: Board, color: Color | str) -> bool:
    return rules.is_stalemate(board, Color.parse(color))


def get_best_move(
    board: Board,
    difficulty: Difficulty | str,
    color: Color | str,
    rng: random.Random | None = None,
) -> Move | None:
    """Engine move for *color*, or None when *color* has no move."""
    return choose_move(board, difficulty, color, rng)
