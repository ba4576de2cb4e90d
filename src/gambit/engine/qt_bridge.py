"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
from time import perf_counter, sleep

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.engine.minimax import MinimaxEngine
from gambit.engine.search import Difficulty, IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Move it to a ``QThread`` and call :meth:`request_move` through a queued
    signal. Each request emits exactly one of ``best_move_ready``,
    ``search_no_move`` or ``search_error``. A running search cannot be
    cancelled; stale results are identified by their request id.
    """

    best_move_ready = pyqtSignal(int, object, int, int, int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_difficulty", "_min_thinking_ms")

    def __init__(
        self,
        *,
        difficulty: Difficulty | str = Difficulty.BEGINNER,
        min_thinking_ms: int | None = None,
        engine: IEngine | None = None,
    ) -> None:
        super().__init__()
        self._engine: IEngine = engine or MinimaxEngine()
        self._difficulty = Difficulty.parse(difficulty)
        self._min_thinking_ms = min_thinking_ms

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @pyqtSlot(object, object, int)
    def request_move(self, board_obj: object, color_obj: object, request_id: int) -> None:
        """Search for the best move on *board_obj* for *color_obj* and emit result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        started = perf_counter()
        try:
            color = Color.parse(color_obj)  # type: ignore[arg-type]
            result = self._engine.search(
                board_obj,
                color,
                SearchLimits.for_difficulty(self._difficulty),
            )
        except Exception as exc:
            _LOGGER.exception("Engine search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        self._pad_thinking_time(started)
        _LOGGER.debug("Request %d answered with %s", request_id, result.best_move)

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot(str)
    def set_difficulty(self, name: str) -> None:
        """Update difficulty (takes effect on the next search)."""
        self._difficulty = Difficulty.parse(name)

    def _pad_thinking_time(self, started: float) -> None:
        min_ms = self._min_thinking_ms
        if min_ms is None:
            min_ms = self._difficulty.thinking_time_ms
        remaining = min_ms / 1000.0 - (perf_counter() - started)
        if remaining > 0:
            sleep(remaining)
