"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.enums import Color
    from gambit.core.move import Move


class Difficulty(IntEnum):
    """AI strength; the value is the search depth in plies."""

    BEGINNER = 1
    INTERMEDIATE = 2
    ADVANCED = 3
    EXPERT = 4

    @property
    def depth(self) -> int:
        return int(self.value)

    @property
    def random_move_chance(self) -> float:
        """Probability of playing a random move instead of searching."""
        return 0.3 if self == Difficulty.BEGINNER else 0.0

    @property
    def thinking_time_ms(self) -> int:
        """Minimum visible thinking time for interactive play."""
        return _THINKING_TIME_MS[self]

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: Difficulty | str) -> Difficulty:
        """Accept a :class:`Difficulty` or its name, e.g. ``"expert"``."""
        if isinstance(value, Difficulty):
            return value
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid difficulty: {value!r}") from None


_THINKING_TIME_MS: dict[Difficulty, int] = {
    Difficulty.BEGINNER: 2000,
    Difficulty.INTERMEDIATE: 2500,
    Difficulty.ADVANCED: 3000,
    Difficulty.EXPERT: 3500,
}


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 2
    random_move_chance: float = 0.0

    @classmethod
    def for_difficulty(cls, difficulty: Difficulty) -> SearchLimits:
        return cls(
            max_depth=difficulty.depth,
            random_move_chance=difficulty.random_move_chance,
        )


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: int
    depth: int
    nodes: int
    randomized: bool = False


class IEngine(Protocol):
    """Protocol for chess engines used by the game layer."""

    def search(
        self,
        board: Board,
        color: Color,
        limits: SearchLimits,
    ) -> SearchResult: ...
