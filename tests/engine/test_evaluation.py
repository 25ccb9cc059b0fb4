"""Tests for the static move scorers."""

import pytest

from kingside.core.board import Board
from kingside.core.enums import Color, PieceType
from kingside.core.types import parse_square as sq
from kingside.engine.evaluation import (
    PIECE_VALUES,
    is_development_move,
    score_move,
    value_of,
)
from kingside.engine.models import Candidate, Difficulty
from kingside.game.state import GameState

# White rook on d1 can take an undefended queen on d5.
FREE_QUEEN = "k.......\n........\n........\n...q....\n" + "........\n" * 3 + "K..R...."

# Black pawn on d4 guards e3.
GUARDED_E3 = "k.......\n" + "........\n" * 3 + "...p....\n........\n........\nK...Q..."


def _candidate(state: GameState, move: str) -> Candidate:
    from_sq, to_sq = sq(move[:2]), sq(move[2:])
    piece = state.get_piece_at(from_sq)
    assert piece is not None
    return Candidate(from_sq, to_sq, piece, state.get_piece_at(to_sq))


def _score(state: GameState, move: str, difficulty: Difficulty) -> int:
    return score_move(state, _candidate(state, move), difficulty)


class TestValues:
    def test_piece_values(self) -> None:
        assert PIECE_VALUES[PieceType.PAWN] == 100
        assert PIECE_VALUES[PieceType.QUEEN] == 900
        assert value_of(None) == 0

    def test_development(self) -> None:
        state = GameState()
        assert is_development_move(_candidate(state, "b1c3"))
        assert is_development_move(_candidate(state, "g1f3"))
        assert not is_development_move(_candidate(state, "e2e4"))


class TestEasy:
    def test_quiet_move_is_neutral(self) -> None:
        assert _score(GameState(), "e2e4", Difficulty.EASY) == 0

    def test_hanging_queen(self) -> None:
        state = GameState.from_board(Board.from_diagram(GUARDED_E3))
        assert _score(state, "e1e3", Difficulty.EASY) == -800
        assert _score(state, "e1e2", Difficulty.EASY) == 0


class TestMedium:
    def test_capture_with_centre_bonus(self) -> None:
        state = GameState.from_board(Board.from_diagram(FREE_QUEEN))
        assert _score(state, "d1d5", Difficulty.MEDIUM) == 910

    @pytest.mark.parametrize(
        ("move", "expected"),
        [("e2e4", 10), ("a2a3", 0), ("b1c3", 10), ("b1a3", 0)],
    )
    def test_opening_moves(self, move: str, expected: int) -> None:
        assert _score(GameState(), move, Difficulty.MEDIUM) == expected

    def test_hanging_queen(self) -> None:
        state = GameState.from_board(Board.from_diagram(GUARDED_E3))
        assert _score(state, "e1e3", Difficulty.MEDIUM) == -1690


class TestHard:
    def test_capture_on_inner_centre(self) -> None:
        state = GameState.from_board(Board.from_diagram(FREE_QUEEN))
        assert _score(state, "d1d5", Difficulty.HARD) == 925

    @pytest.mark.parametrize(
        ("move", "expected"),
        [("b1c3", -265), ("b1a3", -280), ("e2e4", -75), ("e2e3", -85), ("a2a3", -100)],
    )
    def test_opening_moves(self, move: str, expected: int) -> None:
        assert _score(GameState(), move, Difficulty.HARD) == expected

    def test_development_bonus_expires(self) -> None:
        state = GameState()
        pawn_moves = (
            "a2a3", "a7a6", "h2h3", "h7h6", "a3a4",
            "a6a5", "h3h4", "h6h5", "b2b3", "b7b6",
        )  # fmt: skip
        for move in pawn_moves:
            state.execute_move(sq(move[:2]), sq(move[2:]))
        assert state.ply_count == 10
        assert _score(state, "b1c3", Difficulty.HARD) == -305

    def test_mating_move(self) -> None:
        state = GameState.from_board(
            Board.from_diagram("......k.\n.....ppp\n" + "........\n" * 5 + "R.....K.")
        )
        assert _score(state, "a1a8", Difficulty.HARD) == 19_560

    def test_scores_for_black(self) -> None:
        state = GameState()
        state.execute_move(sq("e2"), sq("e4"))
        assert state.side_to_move == Color.BLACK
        assert _score(state, "e7e5", Difficulty.HARD) == -75
