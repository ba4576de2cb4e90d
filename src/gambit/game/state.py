"""Game state machine tracking turn, board history and move history.

The core never owns this object; the UI keeps one per game and passes its
``board`` into the rules and the engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum, auto

from gambit.core.board import Board
from gambit.core.enums import Color, GameResult, PieceType
from gambit.core.move import Move
from gambit.core.move_generator import PROMOTION_ROW
from gambit.core.notation import move_to_notation
from gambit.core.piece import Piece
from gambit.core.rules import Rules, is_in_check, legal_moves
from gambit.core.types import Square, is_on_board

_LOGGER = logging.getLogger(__name__)

PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class IllegalMoveError(ValueError):
    """Raised when a move or promotion cannot be applied to the game."""


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()
    GAME_OVER = auto()


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    notation: str
    board_after: Board
    was_check: bool = False
    was_capture: bool = False


@dataclass
class GameState:
    """Turn, history, check flag and result for one game.

    ``board_history[0]`` is the starting board and ``board_history[-1]`` is
    always the current board, so undo is a pop rather than a reverse move.
    This is a pure data and logic class with no threading or UI.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    is_check: bool = field(default=False, init=False)
    pending_promotion: Square | None = field(default=None, init=False)
    board_history: list[Board] = field(default_factory=list, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or restart) the game."""
        self.board = board.copy() if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.pending_promotion = None
        self.board_history = [self.board]
        self.move_history = []
        self._update_status()
        result = Rules.game_result(self.board, self.side_to_move)
        if result != GameResult.IN_PROGRESS:
            self._end(result)

    # ── Move application ─────────────────────────────────────────────────

    def legal_targets(self, sq: Square) -> list[Square]:
        """Legal destinations for the side to move's piece on *sq*."""
        if not is_on_board(*sq):
            return []
        piece = self.board[sq]
        if piece is None or piece.color != self.side_to_move:
            return []
        if self.phase != GamePhase.AWAITING_MOVE:
            return []
        return legal_moves(self.board, *sq)

    def apply_move(self, move: Move) -> MoveRecord:
        """Validate and apply *move* for the side to move."""
        if self.phase == GamePhase.GAME_OVER:
            raise IllegalMoveError("Game is over")
        if self.phase == GamePhase.AWAITING_PROMOTION:
            raise IllegalMoveError("A promotion piece must be chosen first")
        if not (is_on_board(*move.from_sq) and is_on_board(*move.to_sq)):
            raise IllegalMoveError(f"Move leaves the board: {move.from_sq} -> {move.to_sq}")
        if move.to_sq not in self.legal_targets(move.from_sq):
            raise IllegalMoveError(f"Illegal move: {move}")

        before = self.board
        piece = before[move.from_sq]
        assert piece is not None

        self.board = before.with_move(move)
        record = MoveRecord(
            move=move,
            notation=move_to_notation(before, move),
            board_after=self.board,
            was_capture=before[move.to_sq] is not None,
        )
        self.move_history.append(record)
        self.board_history.append(self.board)

        if piece.piece_type == PieceType.PAWN and move.to_sq[0] == PROMOTION_ROW[piece.color]:
            self.pending_promotion = move.to_sq
            self.phase = GamePhase.AWAITING_PROMOTION
            return record

        self._finish_turn(record)
        return record

    def promote(self, piece_type: PieceType) -> MoveRecord:
        """Replace the pawn awaiting promotion and pass the turn."""
        sq = self.pending_promotion
        if sq is None:
            raise IllegalMoveError("No promotion pending")
        if piece_type not in PROMOTION_CHOICES:
            _LOGGER.warning("Rejected promotion to %s", piece_type.name)
            raise IllegalMoveError(f"Cannot promote to {piece_type.name.lower()}")

        record = self.move_history[-1]
        board_before = self.board_history[-2]
        self.board = self.board.copy()
        self.board[sq] = Piece(self.side_to_move, piece_type)
        record.board_after = self.board
        record.notation = move_to_notation(board_before, record.move, piece_type)
        self.board_history[-1] = self.board

        self.pending_promotion = None
        self.phase = GamePhase.AWAITING_MOVE
        self._finish_turn(record)
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        awaiting_promotion = self.phase == GamePhase.AWAITING_PROMOTION
        self.board_history.pop()
        self.board = self.board_history[-1]
        if not awaiting_promotion:
            # The turn had already passed to the opponent.
            self.side_to_move = self.side_to_move.opposite

        self.pending_promotion = None
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self._update_status()
        return record.move

    # ── Resignation / time-out ───────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self._end(GameResult.win_for(color.opposite))

    def flag_fall(self, color: Color) -> None:
        """Time ran out for *color* (reported by an external clock)."""
        self._end(GameResult.win_for(color.opposite))

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def notations(self) -> list[str]:
        return [record.notation for record in self.move_history]

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish_turn(self, record: MoveRecord) -> None:
        self.side_to_move = self.side_to_move.opposite
        self._update_status()
        record.was_check = self.is_check

        result = Rules.game_result(self.board, self.side_to_move)
        if result != GameResult.IN_PROGRESS:
            _LOGGER.info("Game over after %s: %s", record.notation, result.name)
            self._end(result)

    def _update_status(self) -> None:
        self.is_check = is_in_check(self.board, self.side_to_move)

    def _end(self, result: GameResult) -> None:
        self.result = result
        self.phase = GamePhase.GAME_OVER
        self.pending_promotion = None
