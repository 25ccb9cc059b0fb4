"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.enums import Color, PieceType

# White letters; black uses the lowercase form.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

# Unicode chess glyphs run king..pawn from U+2654 (white) and U+265A (black).
_GLYPH_ORDER = "KQRBNP"
_GLYPH_BASE: dict[Color, int] = {Color.WHITE: 0x2654, Color.BLACK: 0x265A}


@dataclass(frozen=True, slots=True)
class Piece:
    """One of the twelve (piece kind × color) values a board cell can hold."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Diagram character (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a diagram character, e.g. 'N' → white knight."""
        piece_type = _BY_LETTER.get(char.upper()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, piece_type)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        index = _GLYPH_ORDER.index(_LETTERS[self.piece_type])
        return chr(_GLYPH_BASE[self.color] + index)
