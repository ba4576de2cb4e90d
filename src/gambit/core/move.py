"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (from, to) square pair.

    Moves are ephemeral: they never carry captured pieces, promotion choice,
    castling rights or en-passant state.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def coordinate(self) -> str:
        """Coordinate notation, e.g. ``e2e4``."""
        return str(self)
