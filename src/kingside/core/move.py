"""Move history record."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.enums import PieceType
from kingside.core.piece import Piece
from kingside.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """An executed move. Created once by a successful execution, never mutated.

    ``captured`` is the piece that stood on ``to_sq`` before the move.
    ``promotion`` is set when a pawn reached the last rank and was replaced.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    is_check: bool = False
    is_checkmate: bool = False
    is_castling: bool = False
    promotion: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        base = f"{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"
        if self.is_checkmate:
            return base + "#"
        if self.is_check:
            return base + "+"
        return base
