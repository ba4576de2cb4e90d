"""Board-placement text and move-history notation.

Only the placement field of FEN is supported: the engine keeps no side to
move, castling rights, en-passant square or clocks.
"""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import PieceType
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.rules import is_checkmate, is_in_check
from gambit.core.types import FILES, square_name

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(fen: str) -> Board:
    """Parse a FEN placement (first field of a full FEN is also accepted)."""
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    # FEN lists rank 8 first, which is row 0.
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise the placement of *board* to FEN."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def move_to_notation(
    board: Board,
    move: Move,
    promotion: PieceType | None = None,
) -> str:
    """History string for *move* played on *board* (the board before the move).

    Piece letter, ``x`` for captures (pawn captures lead with the origin
    file), destination, ``=Q`` for promotion, then ``+`` or ``#``.
    """
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.from_sq)}")

    is_capture = board[move.to_sq] is not None
    text = piece.letter
    if is_capture:
        if piece.piece_type == PieceType.PAWN:
            text += FILES[move.from_sq[1]]
        text += "x"
    text += square_name(move.to_sq)

    after = board.with_move(move)
    if promotion is not None:
        promoted = Piece(piece.color, promotion)
        after[move.to_sq] = promoted
        text += "=" + promoted.letter

    opponent = piece.color.opposite
    if is_checkmate(after, opponent):
        text += "#"
    elif is_in_check(after, opponent):
        text += "+"
    return text
