"""Chess engine package: evaluation, minimax search and Qt worker bridge.

The Qt bridge is not imported here so that the search can be used without
PyQt6 loaded; import it from ``gambit.engine.qt_bridge``.
"""

from gambit.engine.evaluation import evaluate, material_balance, score_to_pawns
from gambit.engine.minimax import MATE_SCORE, MinimaxEngine, choose_move
from gambit.engine.search import Difficulty, IEngine, SearchLimits, SearchResult

__all__ = [
    "MATE_SCORE",
    "Difficulty",
    "IEngine",
    "MinimaxEngine",
    "SearchLimits",
    "SearchResult",
    "choose_move",
    "evaluate",
    "material_balance",
    "score_to_pawns",
]
