"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from kingside.core import Board, Rules, Color, parse_square

    board = Board.initial()
    Rules.legal_destinations(board, parse_square("e2"))
    Rules.is_in_check(board, Color.WHITE)
"""

from kingside.core.board import Board
from kingside.core.castling import (
    CASTLING_RULES,
    CastlingRights,
    CastlingSide,
    CastlingSquares,
)
from kingside.core.enums import Color, GameStatus, MoveResult, PieceType
from kingside.core.move import Move
from kingside.core.move_generator import pseudo_moves
from kingside.core.piece import Piece
from kingside.core.rules import AppliedMove, Rules
from kingside.core.types import (
    Square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "MoveResult",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "AppliedMove",
    "Board",
    "CASTLING_RULES",
    "CastlingRights",
    "CastlingSide",
    "CastlingSquares",
    "Move",
    "Piece",
    "Rules",
    "pseudo_moves",
]
