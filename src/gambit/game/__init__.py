"""Game management layer: caller-owned state, history and undo.

Quick start::

    from gambit.game import GameState
    from gambit.core import Move, parse_square

    game = GameState()
    game.apply_move(Move(parse_square("e2"), parse_square("e4")))
"""

from gambit.game.state import (
    PROMOTION_CHOICES,
    GamePhase,
    GameState,
    IllegalMoveError,
    MoveRecord,
)

__all__ = [
    "PROMOTION_CHOICES",
    "GamePhase",
    "GameState",
    "IllegalMoveError",
    "MoveRecord",
]
