"""Tests for move application, check, checkmate and stalemate."""

import pytest

from kingside.core.board import Board
from kingside.core.castling import CastlingRights
from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.rules import Rules
from kingside.core.types import parse_square as sq

FOOLS_MATE = """
rnb.kbnr
pppp.ppp
........
....p...
......Pq
.....P..
PPPPP..P
RNBQKBNR
"""

BACK_RANK_MATE = """
R..k....
........
...K....
........
........
........
........
........
"""

STALEMATE = """
.......k
........
.....KQ.
........
........
........
........
........
"""


class TestApplyMove:
    def test_simple_move(self) -> None:
        b = Board.initial()
        applied = Rules.apply_move(b, sq("e2"), sq("e4"))
        assert b[sq("e2")] is None
        assert b[sq("e4")] == Piece(Color.WHITE, PieceType.PAWN)
        assert applied.captured is None
        assert not applied.is_castling

    def test_capture_reports_captured_piece(self) -> None:
        b = Board.from_diagram(FOOLS_MATE)
        applied = Rules.apply_move(b, sq("h4"), sq("h2"))
        assert applied.captured == Piece(Color.WHITE, PieceType.PAWN)
        assert b[sq("h2")] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_empty_source_raises(self) -> None:
        with pytest.raises(ValueError):
            Rules.apply_move(Board.initial(), sq("e4"), sq("e5"))

    def test_castling_moves_rook(self) -> None:
        b = Board.from_diagram("....k...\n" + "........\n" * 6 + "R...K..R")
        applied = Rules.apply_move(b, sq("e1"), sq("g1"))
        assert applied.is_castling
        assert b[sq("g1")] == Piece(Color.WHITE, PieceType.KING)
        assert b[sq("f1")] == Piece(Color.WHITE, PieceType.ROOK)
        assert b[sq("h1")] is None

    def test_queen_side_castling_moves_rook(self) -> None:
        b = Board.from_diagram("r...k...\n" + "........\n" * 6 + "....K...")
        applied = Rules.apply_move(b, sq("e8"), sq("c8"))
        assert applied.is_castling
        assert b[sq("d8")] == Piece(Color.BLACK, PieceType.ROOK)
        assert b[sq("a8")] is None

    def test_pawn_promotes_to_queen(self) -> None:
        b = Board.from_diagram("k.......\n....P...\n" + "........\n" * 5 + "....K...")
        applied = Rules.apply_move(b, sq("e7"), sq("e8"))
        assert applied.promotion == PieceType.QUEEN
        assert applied.piece == Piece(Color.WHITE, PieceType.PAWN)
        assert b[sq("e8")] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_simulate_leaves_original_untouched(self) -> None:
        b = Board.initial()
        scratch = Rules.simulate(b, sq("e2"), sq("e4"))
        assert b == Board.initial()
        assert scratch[sq("e4")] is not None


class TestAttacks:
    def test_knight_reach(self) -> None:
        b = Board.initial()
        assert Rules.is_square_attacked(b, sq("c3"), Color.WHITE)
        assert not Rules.is_square_attacked(b, sq("e5"), Color.WHITE)

    def test_slider_blocked(self) -> None:
        b = Board.from_diagram(FOOLS_MATE)
        assert Rules.is_square_attacked(b, sq("e1"), Color.BLACK)
        b[sq("g3")] = Piece(Color.WHITE, PieceType.PAWN)
        assert not Rules.is_square_attacked(b, sq("e1"), Color.BLACK)

    def test_not_in_check_at_start(self) -> None:
        b = Board.initial()
        assert not Rules.is_in_check(b, Color.WHITE)
        assert not Rules.is_in_check(b, Color.BLACK)

    def test_pinned_piece_cannot_expose_king(self) -> None:
        b = Board.from_diagram(
            "....r..k\n........\n........\n........\n"
            "........\n........\n....N...\n....K..."
        )
        assert Rules.leaves_king_in_check(b, sq("e2"), sq("c3"), Color.WHITE)
        assert Rules.legal_destinations(b, sq("e2")) == set()


class TestGameEnd:
    def test_fools_mate(self) -> None:
        b = Board.from_diagram(FOOLS_MATE)
        assert Rules.is_in_check(b, Color.WHITE)
        assert Rules.is_checkmate(b, Color.WHITE, CastlingRights())
        assert not Rules.is_stalemate(b, Color.WHITE, CastlingRights())

    def test_back_rank_mate(self) -> None:
        b = Board.from_diagram(BACK_RANK_MATE)
        assert Rules.is_checkmate(b, Color.BLACK)
        assert not Rules.is_checkmate(b, Color.WHITE)

    def test_stalemate(self) -> None:
        b = Board.from_diagram(STALEMATE)
        assert Rules.is_stalemate(b, Color.BLACK)
        assert not Rules.is_checkmate(b, Color.BLACK)

    def test_not_stalemate_with_a_free_square(self) -> None:
        b = Board.from_diagram(STALEMATE)
        b[sq("g6")] = None
        assert not Rules.is_stalemate(b, Color.BLACK)

    def test_start_position_has_moves(self) -> None:
        b = Board.initial()
        assert Rules.has_legal_move(b, Color.WHITE, CastlingRights())
        assert Rules.has_legal_move(b, Color.BLACK, CastlingRights())
