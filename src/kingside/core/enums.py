"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def title(self) -> str:
        """Display name, e.g. ``"White"``."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveResult(IntEnum):
    """Outcome code returned by :meth:`GameState.execute_move`.

    ``CHECK`` and ``CASTLING`` are informational codes layered on top of an
    otherwise successful move.
    """

    INVALID = 0
    VALID = 1
    CHECK = 2
    CHECKMATE = 3
    STALEMATE = 4
    CASTLING = 5

    @property
    def is_success(self) -> bool:
        return self != MoveResult.INVALID


class GameStatus(IntEnum):
    """Outcome of a game. Every status but ``IN_PROGRESS`` is terminal."""

    IN_PROGRESS = 0
    WHITE_WON = 1
    BLACK_WON = 2
    DRAWN = 3

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.IN_PROGRESS

    @classmethod
    def won_by(cls, color: Color) -> GameStatus:
        return cls.WHITE_WON if color == Color.WHITE else cls.BLACK_WON
