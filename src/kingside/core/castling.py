"""Castling geometry and the per-king / per-rook "has moved" flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.types import Square


class CastlingSide(Enum):
    KING_SIDE = "king_side"
    QUEEN_SIDE = "queen_side"


@dataclass(frozen=True, slots=True)
class CastlingSquares:
    """Squares the king and rook start from / end up on when castling.

    ``between`` lists the squares separating king and rook; all of them
    must be empty for the castle to be offered.
    """

    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]


def _rules_for(rank: int) -> dict[CastlingSide, CastlingSquares]:
    return {
        CastlingSide.KING_SIDE: CastlingSquares(
            king_from=Square(4, rank),
            king_to=Square(6, rank),
            rook_from=Square(7, rank),
            rook_to=Square(5, rank),
            between=(Square(5, rank), Square(6, rank)),
        ),
        CastlingSide.QUEEN_SIDE: CastlingSquares(
            king_from=Square(4, rank),
            king_to=Square(2, rank),
            rook_from=Square(0, rank),
            rook_to=Square(3, rank),
            between=(Square(1, rank), Square(2, rank), Square(3, rank)),
        ),
    }


CASTLING_RULES: dict[Color, dict[CastlingSide, CastlingSquares]] = {
    Color.WHITE: _rules_for(0),
    Color.BLACK: _rules_for(7),
}


def castling_for_king_move(
    color: Color, from_sq: Square, to_sq: Square
) -> CastlingSquares | None:
    """The castle a king move corresponds to, if it is a two-square step.

    Any horizontal two-square king move on the home rank counts; whether
    it was legal is the move generator's business.
    """
    for squares in CASTLING_RULES[color].values():
        if squares.king_from == from_sq and squares.king_to == to_sq:
            return squares
    return None


@dataclass
class CastlingRights:
    """Independent "has moved" flags. Rook flags are tracked per rook."""

    white_king_moved: bool = False
    white_queen_rook_moved: bool = False
    white_king_rook_moved: bool = False
    black_king_moved: bool = False
    black_queen_rook_moved: bool = False
    black_king_rook_moved: bool = False

    def king_moved(self, color: Color) -> bool:
        if color == Color.WHITE:
            return self.white_king_moved
        return self.black_king_moved

    def rook_moved(self, color: Color, side: CastlingSide) -> bool:
        if color == Color.WHITE:
            if side == CastlingSide.KING_SIDE:
                return self.white_king_rook_moved
            return self.white_queen_rook_moved
        if side == CastlingSide.KING_SIDE:
            return self.black_king_rook_moved
        return self.black_queen_rook_moved

    def may_castle(self, color: Color, side: CastlingSide) -> bool:
        return not self.king_moved(color) and not self.rook_moved(color, side)

    def record_move(self, piece: Piece, from_sq: Square) -> None:
        """Update flags after *piece* left *from_sq*.

        A king sets its flag wherever it moves from; a rook only when it
        leaves its canonical corner square.
        """
        color = piece.color
        if piece.piece_type == PieceType.KING:
            if color == Color.WHITE:
                self.white_king_moved = True
            else:
                self.black_king_moved = True
            return

        if piece.piece_type != PieceType.ROOK:
            return

        for side, squares in CASTLING_RULES[color].items():
            if squares.rook_from != from_sq:
                continue
            if color == Color.WHITE:
                if side == CastlingSide.KING_SIDE:
                    self.white_king_rook_moved = True
                else:
                    self.white_queen_rook_moved = True
            elif side == CastlingSide.KING_SIDE:
                self.black_king_rook_moved = True
            else:
                self.black_queen_rook_moved = True

    def copy(self) -> CastlingRights:
        return CastlingRights(
            white_king_moved=self.white_king_moved,
            white_queen_rook_moved=self.white_queen_rook_moved,
            white_king_rook_moved=self.white_king_rook_moved,
            black_king_moved=self.black_king_moved,
            black_queen_rook_moved=self.black_queen_rook_moved,
            black_king_rook_moved=self.black_king_rook_moved,
        )

    @classmethod
    def none(cls) -> CastlingRights:
        """Every flag set: nobody may castle."""
        return cls(True, True, True, True, True, True)
