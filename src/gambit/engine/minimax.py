"""Pure-Python minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging
import random

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.move import Move
from gambit.core.rules import all_legal_moves, is_in_check
from gambit.engine.evaluation import PIECE_VALUES, evaluate
from gambit.engine.search import Difficulty, IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000_000
MATE_SCORE = 1_000_000


class MinimaxEngine(IEngine):
    """Fixed-depth minimax with alpha-beta; white maximises, black minimises.

    Holds no position state between searches. Ties at the root keep the
    first move in row-major piece order, then generation order.
    """

    __slots__ = ("_rng", "_nodes")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._nodes = 0

    def search(
        self,
        board: Board,
        color: Color,
        limits: SearchLimits,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._nodes = 0

        if limits.random_move_chance and self._rng.random() < limits.random_move_chance:
            moves = all_legal_moves(board, color)
            if not moves:
                return SearchResult(None, 0, 0, 0, randomized=True)
            move = self._rng.choice(moves)
            _LOGGER.debug("Random move for %s: %s", color, move)
            return SearchResult(move, evaluate(board.with_move(move)), 0, 0, randomized=True)

        root_moves = all_legal_moves(board, color)
        if not root_moves:
            return SearchResult(None, self._terminal_score(board, color, 0), 0, 0)

        score, move = self._search_root(board, color, root_moves, limits.max_depth)
        _LOGGER.debug(
            "Best move for %s at depth %d: %s (score %d, %d nodes)",
            color,
            limits.max_depth,
            move,
            score,
            self._nodes,
        )
        return SearchResult(move, score, limits.max_depth, self._nodes)

    def _search_root(
        self,
        board: Board,
        color: Color,
        root_moves: list[Move],
        depth: int,
    ) -> tuple[int, Move | None]:
        maximizing = color == Color.WHITE
        best_score = -_INF_SCORE if maximizing else _INF_SCORE
        best_move: Move | None = None
        alpha = -_INF_SCORE
        beta = _INF_SCORE

        for move in root_moves:
            score = self.minimax(
                board.with_move(move),
                depth - 1,
                alpha,
                beta,
                color.opposite,
            )
            # Strictly better only: the first of equal moves is kept.
            if maximizing and score > best_score:
                best_score = score
                best_move = move
                alpha = max(alpha, score)
            elif not maximizing and score < best_score:
                best_score = score
                best_move = move
                beta = min(beta, score)

        return best_score, best_move

    def minimax(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        side_to_move: Color,
    ) -> int:
        """White-positive score of *board* searched *depth* plies deep."""
        self._nodes += 1
        if depth <= 0:
            return evaluate(board)

        moves = self._order_moves(board, all_legal_moves(board, side_to_move))
        if not moves:
            return self._terminal_score(board, side_to_move, depth)

        if side_to_move == Color.WHITE:
            best_score = -_INF_SCORE
            for move in moves:
                score = self.minimax(
                    board.with_move(move), depth - 1, alpha, beta, Color.BLACK
                )
                best_score = max(best_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return best_score

        best_score = _INF_SCORE
        for move in moves:
            score = self.minimax(
                board.with_move(move), depth - 1, alpha, beta, Color.WHITE
            )
            best_score = min(best_score, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best_score

    def _terminal_score(self, board: Board, side_to_move: Color, depth: int) -> int:
        """Checkmate or stalemate for the side that has no move.

        Remaining *depth* is added so that quicker mates score further from 0.
        """
        if not is_in_check(board, side_to_move):
            return 0
        mate = MATE_SCORE + depth
        return -mate if side_to_move == Color.WHITE else mate

    def _order_moves(self, board: Board, moves: list[Move]) -> list[Move]:
        # Captures first (most valuable victim, least valuable attacker).
        # The sort is stable, so quiet moves keep their generation order.
        return sorted(moves, key=lambda move: -self._capture_score(board, move))

    def _capture_score(self, board: Board, move: Move) -> int:
        victim = board[move.to_sq]
        attacker = board[move.from_sq]
        if victim is None or attacker is None:
            return 0
        return 10 * PIECE_VALUES[victim.piece_type] - PIECE_VALUES[attacker.piece_type]


def choose_move(
    board: Board,
    difficulty: Difficulty | str,
    color: Color | str,
    rng: random.Random | None = None,
) -> Move | None:
    """Engine move for *color* at *difficulty*, or None when it has no move."""
    limits = SearchLimits.for_difficulty(Difficulty.parse(difficulty))
    result = MinimaxEngine(rng).search(board, Color.parse(color), limits)
    return result.best_move
