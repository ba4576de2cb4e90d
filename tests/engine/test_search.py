"""Tests for the minimax engine."""

import random

import pytest

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.move import Move
from gambit.core.notation import board_from_fen
from gambit.core.rules import all_legal_moves, is_checkmate, is_stalemate
from gambit.core.types import D2, D4
from gambit.engine import (
    MATE_SCORE,
    Difficulty,
    MinimaxEngine,
    SearchLimits,
    choose_move,
)

BACK_RANK = "6k1/5ppp/8/8/8/8/8/R5K1"
HANGING_QUEEN = "k2r4/8/8/8/8/8/8/3Q3K"
ONE_MOVE = "k5r1/8/8/8/8/8/8/7K"
STALEMATE_TRAP = "7k/8/8/8/8/2q5/8/K7"

_WIDE = 10**9


def _unbounded_root_search(board: Board, color: Color, depth: int) -> tuple[Move | None, int | None]:
    """Root loop that hands every child the full window."""
    engine = MinimaxEngine()
    best_move: Move | None = None
    best_score: int | None = None
    for move in all_legal_moves(board, color):
        score = engine.minimax(board.with_move(move), depth - 1, -_WIDE, _WIDE, color.opposite)
        if best_score is None:
            better = True
        elif color == Color.WHITE:
            better = score > best_score
        else:
            better = score < best_score
        if better:
            best_move, best_score = move, score
    return best_move, best_score


class _FixedRng(random.Random):
    """Deterministic stand-in: fixed roll, always picks the last choice."""

    def __init__(self, roll: float) -> None:
        super().__init__(0)
        self.roll = roll

    def random(self) -> float:
        return self.roll

    def choice(self, seq):
        return seq[-1]


class TestDifficulty:
    def test_depths(self) -> None:
        assert Difficulty.BEGINNER.depth == 1
        assert Difficulty.INTERMEDIATE.depth == 2
        assert Difficulty.ADVANCED.depth == 3
        assert Difficulty.EXPERT.depth == 4

    def test_only_beginner_plays_random_moves(self) -> None:
        assert Difficulty.BEGINNER.random_move_chance == 0.3
        for level in (Difficulty.INTERMEDIATE, Difficulty.ADVANCED, Difficulty.EXPERT):
            assert level.random_move_chance == 0.0

    def test_thinking_time(self) -> None:
        assert Difficulty.BEGINNER.thinking_time_ms == 2000
        assert Difficulty.EXPERT.thinking_time_ms == 3500

    def test_parse(self) -> None:
        assert Difficulty.parse("expert") is Difficulty.EXPERT
        assert Difficulty.parse(" Beginner ") is Difficulty.BEGINNER
        assert Difficulty.parse(Difficulty.ADVANCED) is Difficulty.ADVANCED
        assert str(Difficulty.INTERMEDIATE) == "intermediate"

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError):
            Difficulty.parse("grandmaster")

    def test_limits_for_difficulty(self) -> None:
        limits = SearchLimits.for_difficulty(Difficulty.BEGINNER)
        assert limits.max_depth == 1
        assert limits.random_move_chance == 0.3


class TestMinimaxEngine:
    def test_single_legal_move_is_returned(self) -> None:
        board = board_from_fen(ONE_MOVE)
        assert all_legal_moves(board, Color.WHITE) == [Move((7, 7), (6, 7))]

        result = MinimaxEngine().search(board, Color.WHITE, SearchLimits(max_depth=1))
        assert result.best_move == Move((7, 7), (6, 7))

    def test_ties_keep_first_move_in_scan_order(self) -> None:
        # d4 and e4 score the same; the d-pawn is scanned first.
        result = MinimaxEngine().search(
            Board.initial(), Color.WHITE, SearchLimits(max_depth=1)
        )
        assert result.best_move == Move(D2, D4)
        assert result.score == -325

    def test_black_takes_hanging_queen(self) -> None:
        board = board_from_fen(HANGING_QUEEN)
        result = MinimaxEngine().search(board, Color.BLACK, SearchLimits(max_depth=1))
        assert result.best_move == Move((0, 3), (7, 3))

    @pytest.mark.parametrize("depth", [2, 3])
    def test_finds_mate_in_one(self, depth: int) -> None:
        board = board_from_fen(BACK_RANK)
        result = MinimaxEngine().search(board, Color.WHITE, SearchLimits(max_depth=depth))

        assert result.best_move == Move((7, 0), (0, 0))
        assert result.score >= MATE_SCORE
        assert is_checkmate(board.with_move(result.best_move), Color.BLACK)

    def test_returns_none_for_checkmated_side(self) -> None:
        board = board_from_fen("R2k4/8/3K4/8/8/8/8/8")
        result = MinimaxEngine().search(board, Color.BLACK, SearchLimits(max_depth=3))
        assert result.best_move is None
        assert result.score == MATE_SCORE

    def test_returns_none_for_stalemated_side(self) -> None:
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8")
        result = MinimaxEngine().search(board, Color.BLACK, SearchLimits(max_depth=2))
        assert result.best_move is None
        assert result.score == 0

    def test_stalemating_the_opponent_scores_as_a_draw(self) -> None:
        # Qb3 leaves white without a move; a queen up, black prefers to play on.
        board = board_from_fen(STALEMATE_TRAP)
        stalemating = Move((5, 2), (5, 1))
        assert is_stalemate(board.with_move(stalemating), Color.WHITE)

        result = MinimaxEngine().search(board, Color.BLACK, SearchLimits(max_depth=2))

        assert result.best_move == Move((0, 7), (0, 6))
        assert result.score == -900

    @pytest.mark.parametrize(
        "fen, color",
        [
            (HANGING_QUEEN, Color.BLACK),
            (BACK_RANK, Color.WHITE),
            ("4k3/8/8/3p4/4P3/8/8/4K3", Color.WHITE),
            ("4k3/2p5/8/8/8/8/5N2/R3K3", Color.BLACK),
        ],
    )
    def test_root_window_matches_full_window_search(self, fen: str, color: Color) -> None:
        board = board_from_fen(fen)
        expected_move, expected_score = _unbounded_root_search(board, color, 3)

        result = MinimaxEngine().search(board, color, SearchLimits(max_depth=3))

        assert result.best_move == expected_move
        assert result.score == expected_score

    def test_rejects_zero_depth(self) -> None:
        with pytest.raises(ValueError):
            MinimaxEngine().search(Board.initial(), Color.WHITE, SearchLimits(max_depth=0))

    def test_counts_nodes(self) -> None:
        result = MinimaxEngine().search(
            Board.initial(), Color.WHITE, SearchLimits(max_depth=2)
        )
        assert result.depth == 2
        assert result.nodes > 20
        assert not result.randomized

    def test_does_not_mutate_board(self) -> None:
        board = Board.initial()
        snapshot = board.copy()
        MinimaxEngine().search(board, Color.BLACK, SearchLimits(max_depth=2))
        assert board == snapshot


class TestRandomMoves:
    def test_random_roll_short_circuits_search(self) -> None:
        board = Board.initial()
        engine = MinimaxEngine(_FixedRng(0.0))
        result = engine.search(board, Color.WHITE, SearchLimits.for_difficulty(Difficulty.BEGINNER))

        assert result.randomized
        assert result.nodes == 0
        assert result.best_move == all_legal_moves(board, Color.WHITE)[-1]

    def test_high_roll_searches(self) -> None:
        engine = MinimaxEngine(_FixedRng(0.99))
        result = engine.search(
            Board.initial(), Color.WHITE, SearchLimits.for_difficulty(Difficulty.BEGINNER)
        )
        assert not result.randomized
        assert result.best_move == Move(D2, D4)

    def test_random_move_is_legal(self) -> None:
        board = board_from_fen("k2r4/8/8/8/8/8/3R4/3K4")
        # Only moves along the d-file keep the pinned rook legal.
        engine = MinimaxEngine(_FixedRng(0.0))
        result = engine.search(board, Color.WHITE, SearchLimits(max_depth=1, random_move_chance=1.0))
        assert result.best_move in all_legal_moves(board, Color.WHITE)

    def test_random_with_no_moves(self) -> None:
        board = board_from_fen("R2k4/8/3K4/8/8/8/8/8")
        engine = MinimaxEngine(_FixedRng(0.0))
        result = engine.search(board, Color.BLACK, SearchLimits(max_depth=1, random_move_chance=1.0))
        assert result.best_move is None


class TestChooseMove:
    def test_expert_black_moves_own_piece(self) -> None:
        board = board_from_fen(HANGING_QUEEN)
        move = choose_move(board, "expert", "black")

        assert move is not None
        mover = board[move.from_sq]
        target = board[move.to_sq]
        assert mover is not None and mover.color == Color.BLACK
        assert target is None or target.color == Color.WHITE
        assert move == Move((0, 3), (7, 3))

    def test_seeded_beginner_is_reproducible(self) -> None:
        board = Board.initial()
        first = choose_move(board, Difficulty.BEGINNER, Color.BLACK, random.Random(7))
        second = choose_move(board, Difficulty.BEGINNER, Color.BLACK, random.Random(7))
        assert first == second
        assert first in all_legal_moves(board, Color.BLACK)
