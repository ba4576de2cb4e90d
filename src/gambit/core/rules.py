"""Check-aware legality and terminal-state detection."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, GameResult
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator, pseudo_legal_moves
from gambit.core.types import Square, is_on_board


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? ``False`` when the king is missing."""
    return MoveGenerator(board).is_in_check(color)


def legal_moves(board: Board, row: int, col: int) -> list[Square]:
    """Pseudo-legal targets that do not leave the mover's king in check."""
    if not is_on_board(row, col):
        return []
    piece = board[(row, col)]
    if piece is None:
        return []

    from_sq = (row, col)
    return [
        to_sq
        for to_sq in pseudo_legal_moves(board, row, col)
        if not is_in_check(board.with_move(Move(from_sq, to_sq)), piece.color)
    ]


def all_legal_moves(board: Board, color: Color) -> list[Move]:
    """Every legal move for *color*, pieces in row-major scan order."""
    moves: list[Move] = []
    for from_sq in board.pieces(color):
        for to_sq in legal_moves(board, *from_sq):
            moves.append(Move(from_sq, to_sq))
    return moves


def has_legal_move(board: Board, color: Color) -> bool:
    for row, col in board.pieces(color):
        if legal_moves(board, row, col):
            return True
    return False


def is_checkmate(board: Board, color: Color) -> bool:
    return is_in_check(board, color) and not has_legal_move(board, color)


def is_stalemate(board: Board, color: Color) -> bool:
    return not is_in_check(board, color) and not has_legal_move(board, color)


def game_result(board: Board, side_to_move: Color) -> GameResult:
    """Determine the result with *side_to_move* about to play."""
    if has_legal_move(board, side_to_move):
        return GameResult.IN_PROGRESS
    if is_in_check(board, side_to_move):
        return GameResult.win_for(side_to_move.opposite)
    return GameResult.DRAW  # stalemate


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    is_in_check = staticmethod(is_in_check)
    legal_moves = staticmethod(legal_moves)
    all_legal_moves = staticmethod(all_legal_moves)
    has_legal_move = staticmethod(has_legal_move)
    is_checkmate = staticmethod(is_checkmate)
    is_stalemate = staticmethod(is_stalemate)
    game_result = staticmethod(game_result)
