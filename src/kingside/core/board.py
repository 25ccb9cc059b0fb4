"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.types import BOARD_SIZE, Square, is_valid_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of ``Piece | None`` cells, indexed by :class:`Square`.

    A small value type: :meth:`copy` duplicates every row, so a scratch copy
    can be mutated freely without touching the source board.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        # [rank][file]
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        return self._cells[sq.rank][sq.file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_valid_square(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        self._cells[sq.rank][sq.file] = piece

    def get(self, sq: Square) -> Piece | None:
        """Like ``board[sq]`` but returns ``None`` for off-board squares."""
        if not is_valid_square(sq):
            return None
        return self._cells[sq.rank][sq.file]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Every occupied square in scan order (rank 0 first, then by file)."""
        for rank, row in enumerate(self._cells):
            for file, piece in enumerate(row):
                if piece is not None:
                    yield Square(file, rank), piece

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All ``(square, piece)`` pairs belonging to *color*."""
        return [(sq, p) for sq, p in self.occupied() if p.color == color]

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        for sq, piece in self.occupied():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        raise ValueError(f"No {color.name} king on board")

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    def clear(self) -> None:
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(BOARD_SIZE):
            b[Square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(_BACK_RANK):
            b[Square(f, 0)] = Piece(Color.WHITE, pt)
            b[Square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from eight rows of piece characters, rank 8 first.

        Empty cells are ``.``; whitespace inside a row is ignored, so the
        output of ``repr(board)`` without its coordinates is accepted::

            Board.from_diagram('''
                r . . . k . . r
                . . . . . . . .
                ...
            ''')
        """
        rows = [
            "".join(line.split())
            for line in diagram.strip().splitlines()
            if line.strip()
        ]
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError("Board diagram must have 8 rows of 8 cells")

        b = cls()
        for row_idx, row in enumerate(rows):
            rank = BOARD_SIZE - 1 - row_idx
            for file, char in enumerate(row):
                if char != ".":
                    b[Square(file, rank)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self._cells[rank][file]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
