"""Pseudo-move generation.

A pseudo-move is a destination that respects piece geometry and board
occupancy but ignores whether the move leaves the mover's own king in
check. Filtering for king safety happens in the game state machine.
"""

from __future__ import annotations

from collections.abc import Callable

from kingside.core.board import Board
from kingside.core.castling import CASTLING_RULES, CastlingRights
from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.types import Square, is_valid_square

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
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))

PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}

PieceMoveFn = Callable[[Board, Square, Piece], set[Square]]


# -- Public API -------------------------------------------------------------


def pseudo_moves(
    board: Board,
    sq: Square,
    rights: CastlingRights | None = None,
) -> set[Square]:
    """Every pseudo-move for the piece on *sq*.

    The caller guarantees *sq* holds a piece. Castling destinations are only
    added when *rights* is given; attack detection leaves it out.
    """
    piece = board[sq]
    if piece is None:
        return set()

    moves = _GENERATORS[piece.piece_type](board, sq, piece)
    if rights is not None and piece.piece_type == PieceType.KING:
        moves |= castling_moves(board, sq, piece, rights)
    return moves


def castling_moves(
    board: Board, sq: Square, king: Piece, rights: CastlingRights
) -> set[Square]:
    """Two-square castle destinations available to *king* standing on *sq*.

    Only "has moved" flags and emptiness of the squares between king and
    rook are checked; attacked transit squares are not.
    """
    color = king.color
    rook = Piece(color, PieceType.ROOK)
    moves: set[Square] = set()
    for side, squares in CASTLING_RULES[color].items():
        if sq != squares.king_from or not rights.may_castle(color, side):
            continue
        if board[squares.rook_from] != rook:
            continue
        if all(board.is_empty(between) for between in squares.between):
            moves.add(squares.king_to)
    return moves


# -- Piece-specific generators ----------------------------------------------


def pawn_moves(board: Board, sq: Square, piece: Piece) -> set[Square]:
    moves: set[Square] = set()
    color = piece.color
    direction = PAWN_DIRECTION[color]

    one_step = sq.offset(0, direction)
    if is_valid_square(one_step) and board.is_empty(one_step):
        moves.add(one_step)
        if sq.rank == PAWN_START_RANK[color]:
            two_step = sq.offset(0, 2 * direction)
            if is_valid_square(two_step) and board.is_empty(two_step):
                moves.add(two_step)

    for df in (-1, 1):
        cap_sq = sq.offset(df, direction)
        if not is_valid_square(cap_sq):
            continue
        target = board[cap_sq]
        if target is not None and target.color != color:
            moves.add(cap_sq)
    return moves


def knight_moves(board: Board, sq: Square, piece: Piece) -> set[Square]:
    return _step_moves(board, sq, piece, KNIGHT_OFFSETS)


def bishop_moves(board: Board, sq: Square, piece: Piece) -> set[Square]:
    return _sliding_moves(board, sq, piece, BISHOP_DIRS)


def rook_moves(board: Board, sq: Square, piece: Piece) -> set[Square]:
    return _sliding_moves(board, sq, piece, ROOK_DIRS)


def queen_moves(board: Board, sq: Square, piece: Piece) -> set[Square]:
    return bishop_moves(board, sq, piece) | rook_moves(board, sq, piece)


def king_moves(board: Board, sq: Square, piece: Piece) -> set[Square]:
    return _step_moves(board, sq, piece, KING_OFFSETS)


_GENERATORS: dict[PieceType, PieceMoveFn] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


# -- Shared helpers ---------------------------------------------------------


def _step_moves(
    board: Board,
    sq: Square,
    piece: Piece,
    offsets: tuple[tuple[int, int], ...],
) -> set[Square]:
    moves: set[Square] = set()
    for df, dr in offsets:
        to_sq = sq.offset(df, dr)
        if not is_valid_square(to_sq):
            continue
        target = board[to_sq]
        if target is None or target.color != piece.color:
            moves.add(to_sq)
    return moves


def _sliding_moves(
    board: Board,
    sq: Square,
    piece: Piece,
    directions: tuple[tuple[int, int], ...],
) -> set[Square]:
    moves: set[Square] = set()
    for df, dr in directions:
        to_sq = sq.offset(df, dr)
        while is_valid_square(to_sq):
            target = board[to_sq]
            if target is None:
                moves.add(to_sq)
                to_sq = to_sq.offset(df, dr)
                continue
            if target.color != piece.color:
                moves.add(to_sq)
            break
    return moves
