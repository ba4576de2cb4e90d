"""Pseudo-legal move generation + attack detection.

Nothing here looks at whether a move leaves the mover's own king in check;
that filter lives in :mod:`gambit.core.rules`.
"""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import Square, is_on_board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# White pawns walk toward row 0, black pawns toward row 7.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


def pseudo_legal_moves(board: Board, row: int, col: int) -> list[Square]:
    """Target squares for the piece on (row, col), ignoring check.

    An empty or off-board origin yields an empty list.
    """
    if not is_on_board(row, col):
        return []
    piece = board[(row, col)]
    if piece is None:
        return []

    pt = piece.piece_type
    if pt == PieceType.PAWN:
        return _pawn_targets(board, row, col, piece)
    if pt == PieceType.ROOK:
        return _sliding_targets(board, row, col, piece, ROOK_DIRS)
    if pt == PieceType.KNIGHT:
        return _step_targets(board, row, col, piece, KNIGHT_OFFSETS)
    if pt == PieceType.BISHOP:
        return _sliding_targets(board, row, col, piece, BISHOP_DIRS)
    if pt == PieceType.QUEEN:
        return _sliding_targets(board, row, col, piece, QUEEN_DIRS)
    return _step_targets(board, row, col, piece, KING_OFFSETS)


class MoveGenerator:
    """Generates pseudo-legal moves and answers attack queries for a board.

    The generator only reads the board it was given.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_targets(self, sq: Square) -> list[Square]:
        row, col = sq
        return pseudo_legal_moves(self._board, row, col)

    def pseudo_legal_moves(self, color: Color) -> list[Move]:
        """Every pseudo-legal move for *color*, pieces in row-major order."""
        moves: list[Move] = []
        for from_sq in self._board.pieces(color):
            for to_sq in self.pseudo_legal_targets(from_sq):
                moves.append(Move(from_sq, to_sq))
        return moves

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Does any piece of *by_color* have *sq* among its pseudo-legal targets?"""
        for from_sq in self._board.pieces(by_color):
            if sq in self.pseudo_legal_targets(from_sq):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked? A missing king is never in check."""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return _is_occupied_square_attacked(self._board, king_sq, color.opposite)


def _is_occupied_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Reverse lookup from *sq*, which must hold a piece not of *by_color*.

    Gives the same answer as scanning every attacker's pseudo-legal targets:
    pawns can only reach an occupied square diagonally.
    """
    row, col = sq

    pawn_row = row - PAWN_DIRECTION[by_color]
    pawn = Piece(by_color, PieceType.PAWN)
    for pawn_col in (col - 1, col + 1):
        if is_on_board(pawn_row, pawn_col) and board[(pawn_row, pawn_col)] == pawn:
            return True

    for offsets, pt in ((KNIGHT_OFFSETS, PieceType.KNIGHT), (KING_OFFSETS, PieceType.KING)):
        attacker = Piece(by_color, pt)
        for dr, dc in offsets:
            r = row + dr
            c = col + dc
            if is_on_board(r, c) and board[(r, c)] == attacker:
                return True

    for directions, sliders in (
        (ROOK_DIRS, (PieceType.ROOK, PieceType.QUEEN)),
        (BISHOP_DIRS, (PieceType.BISHOP, PieceType.QUEEN)),
    ):
        for dr, dc in directions:
            r = row + dr
            c = col + dc
            while is_on_board(r, c):
                piece = board[(r, c)]
                if piece is not None:
                    if piece.color == by_color and piece.piece_type in sliders:
                        return True
                    break
                r += dr
                c += dc
    return False


# -- Piece-specific generators (private) -----------------------------------


def _can_land(board: Board, sq: Square, piece: Piece) -> bool:
    target = board[sq]
    return target is None or target.color != piece.color


def _pawn_targets(board: Board, row: int, col: int, piece: Piece) -> list[Square]:
    targets: list[Square] = []
    direction = PAWN_DIRECTION[piece.color]

    one_row = row + direction
    if is_on_board(one_row, col) and board.is_empty((one_row, col)):
        targets.append((one_row, col))
        two_row = row + 2 * direction
        if row == PAWN_START_ROW[piece.color] and board.is_empty((two_row, col)):
            targets.append((two_row, col))

    for cap_col in (col - 1, col + 1):
        if not is_on_board(one_row, cap_col):
            continue
        target = board[(one_row, cap_col)]
        if target is not None and target.color != piece.color:
            targets.append((one_row, cap_col))
    return targets


def _sliding_targets(
    board: Board,
    row: int,
    col: int,
    piece: Piece,
    directions: tuple[tuple[int, int], ...],
) -> list[Square]:
    targets: list[Square] = []
    for dr, dc in directions:
        r = row + dr
        c = col + dc
        while is_on_board(r, c):
            target = board[(r, c)]
            if target is None:
                targets.append((r, c))
            else:
                if target.color != piece.color:
                    targets.append((r, c))
                break
            r += dr
            c += dc
    return targets


def _step_targets(
    board: Board,
    row: int,
    col: int,
    piece: Piece,
    offsets: tuple[tuple[int, int], ...],
) -> list[Square]:
    targets: list[Square] = []
    for dr, dc in offsets:
        r = row + dr
        c = col + dc
        if is_on_board(r, c) and _can_land(board, (r, c), piece):
            targets.append((r, c))
    return targets
