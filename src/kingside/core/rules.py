"""Board-level chess rules: move application, check, checkmate, stalemate."""

from __future__ import annotations

from typing import NamedTuple

from kingside.core.board import Board
from kingside.core.castling import CastlingRights, castling_for_king_move
from kingside.core.enums import Color, PieceType
from kingside.core.move_generator import PROMOTION_RANK, pseudo_moves
from kingside.core.piece import Piece
from kingside.core.types import Square


class AppliedMove(NamedTuple):
    """What :meth:`Rules.apply_move` did to the board."""

    piece: Piece
    captured: Piece | None
    is_castling: bool
    promotion: PieceType | None


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Check detection scans every opposing piece and asks whether any of its
    pseudo-moves lands on the king. That is the dominant cost of legality
    filtering, and cheap enough on an 8x8 board.
    """

    # -- Move application ---------------------------------------------------

    @staticmethod
    def apply_move(board: Board, from_sq: Square, to_sq: Square) -> AppliedMove:
        """Move the piece on *from_sq* to *to_sq* in place.

        A two-square king move also relocates the matching rook, and a pawn
        reaching the last rank becomes a queen. No legality check.
        """
        piece = board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")
        captured = board[to_sq]

        is_castling = False
        if piece.piece_type == PieceType.KING:
            squares = castling_for_king_move(piece.color, from_sq, to_sq)
            if squares is not None:
                is_castling = True
                board[squares.rook_to] = board[squares.rook_from]
                board[squares.rook_from] = None

        promotion: PieceType | None = None
        placed = piece
        if (
            piece.piece_type == PieceType.PAWN
            and to_sq.rank == PROMOTION_RANK[piece.color]
        ):
            promotion = PieceType.QUEEN
            placed = Piece(piece.color, PieceType.QUEEN)

        board[to_sq] = placed
        board[from_sq] = None
        return AppliedMove(piece, captured, is_castling, promotion)

    @staticmethod
    def simulate(board: Board, from_sq: Square, to_sq: Square) -> Board:
        """Scratch copy of *board* with the move applied."""
        scratch = board.copy()
        Rules.apply_move(scratch, from_sq, to_sq)
        return scratch

    # -- Attack / check -----------------------------------------------------

    @staticmethod
    def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
        """Is *sq* reachable by a pseudo-move of any *by_color* piece?"""
        for from_sq, piece in board.occupied():
            if piece.color != by_color:
                continue
            if sq in pseudo_moves(board, from_sq):
                return True
        return False

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return Rules.is_square_attacked(
            board, board.king_square(color), color.opposite
        )

    @staticmethod
    def leaves_king_in_check(
        board: Board, from_sq: Square, to_sq: Square, color: Color
    ) -> bool:
        return Rules.is_in_check(Rules.simulate(board, from_sq, to_sq), color)

    # -- Legal moves --------------------------------------------------------

    @staticmethod
    def legal_destinations(
        board: Board,
        sq: Square,
        rights: CastlingRights | None = None,
    ) -> set[Square]:
        """Pseudo-moves of the piece on *sq* that keep its own king safe."""
        piece = board[sq]
        if piece is None:
            return set()
        return {
            to_sq
            for to_sq in pseudo_moves(board, sq, rights)
            if not Rules.leaves_king_in_check(board, sq, to_sq, piece.color)
        }

    @staticmethod
    def has_legal_move(
        board: Board, color: Color, rights: CastlingRights | None = None
    ) -> bool:
        for sq, _ in board.pieces(color):
            for to_sq in pseudo_moves(board, sq, rights):
                if not Rules.leaves_king_in_check(board, sq, to_sq, color):
                    return True
        return False

    @staticmethod
    def is_checkmate(
        board: Board, color: Color, rights: CastlingRights | None = None
    ) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color, rights)

    @staticmethod
    def is_stalemate(
        board: Board, color: Color, rights: CastlingRights | None = None
    ) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color, rights)
