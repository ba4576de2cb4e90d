"""Square type alias and coordinate helpers.

Board layout (row-major, black at the top):
    row 0 = rank 8 (black back rank), row 7 = rank 1 (white back rank)
    col 0 = file a, col 7 = file h

    (0, 0) = a8 ... (0, 7) = h8
    ...
    (7, 0) = a1 ... (7, 7) = h1
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

FILES = "abcdefgh"


def is_on_board(row: int, col: int) -> bool:
    """Both coordinates inside the 8x8 grid."""
    return 0 <= row < 8 and 0 <= col < 8


def rank_number(row: int) -> int:
    """Chess rank 1–8 for a row index."""
    return 8 - row


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2', (0, 0) → 'a8'."""
    row, col = sq
    return FILES[col] + str(rank_number(row))


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (8 - int(name[1]), FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple((r, c) for r in range(8) for c in range(8))

# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
