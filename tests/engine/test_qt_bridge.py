"""Tests for the Qt AI player driver."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from kingside.core.enums import Color, MoveResult, PieceType
from kingside.core.piece import Piece
from kingside.core.types import parse_square as sq
from kingside.engine.models import Candidate, Difficulty
from kingside.engine.qt_bridge import AIPlayerDriver
from kingside.engine.settings import EngineSettings
from kingside.game.state import GameState

pytestmark = pytest.mark.usefixtures("qapp")


class _NoMoveSelector:
    def select_move(
        self, _state: GameState, _color: Color, _difficulty: Difficulty
    ) -> Candidate | None:
        return None


class _IllegalSelector:
    def select_move(
        self, _state: GameState, _color: Color, _difficulty: Difficulty
    ) -> Candidate | None:
        return Candidate(sq("e7"), sq("e4"), Piece(Color.BLACK, PieceType.PAWN))


def _black_to_move() -> GameState:
    state = GameState()
    state.execute_move(sq("e2"), sq("e4"))
    return state


def _settings(**kwargs) -> EngineSettings:
    kwargs.setdefault("enabled", True)
    kwargs.setdefault("seed", 3)
    return EngineSettings(**kwargs)


class TestAIPlayerDriver:
    def test_plays_on_its_turn(self) -> None:
        state = _black_to_move()
        driver = AIPlayerDriver(state, _settings(difficulty=Difficulty.HARD))
        played = QSignalSpy(driver.move_played)

        assert driver.tick()

        assert state.side_to_move == Color.WHITE
        assert state.ply_count == 2
        assert len(played) == 1
        assert played[0][1] == int(MoveResult.VALID)
        driver.stop()

    def test_waits_for_its_turn(self) -> None:
        state = GameState()
        driver = AIPlayerDriver(state, _settings())
        played = QSignalSpy(driver.move_played)

        assert not driver.tick()
        assert state.ply_count == 0
        assert len(played) == 0
        driver.stop()

    def test_disabled_does_nothing(self) -> None:
        state = _black_to_move()
        driver = AIPlayerDriver(state, _settings(enabled=False))

        assert not driver.is_running()
        assert not driver.tick()
        assert state.ply_count == 1

    def test_game_over_does_nothing(self) -> None:
        state = GameState()
        for move in ("f2f3", "e7e5", "g2g4", "d8h4"):
            state.execute_move(sq(move[:2]), sq(move[2:]))
        driver = AIPlayerDriver(state, _settings(ai_color=Color.WHITE))

        assert not driver.tick()
        assert state.ply_count == 4
        driver.stop()

    def test_emits_no_move(self) -> None:
        state = _black_to_move()
        driver = AIPlayerDriver(state, _settings(), selector=_NoMoveSelector())
        no_move = QSignalSpy(driver.no_move_available)

        assert not driver.tick()

        assert len(no_move) == 1
        assert no_move[0][0] == int(Color.BLACK)
        driver.stop()

    def test_emits_rejected(self) -> None:
        state = _black_to_move()
        driver = AIPlayerDriver(state, _settings(), selector=_IllegalSelector())
        rejected = QSignalSpy(driver.move_rejected)
        played = QSignalSpy(driver.move_played)

        assert not driver.tick()

        assert len(rejected) == 1
        assert len(played) == 0
        assert state.side_to_move == Color.BLACK
        driver.stop()

    def test_enable_toggles_timer(self) -> None:
        driver = AIPlayerDriver(GameState(), _settings(enabled=False))
        assert not driver.is_running()

        driver.set_enabled(True)
        assert driver.is_enabled()
        assert driver.is_running()

        driver.set_enabled(False)
        assert not driver.is_running()

    def test_reconfigure(self) -> None:
        state = GameState()
        driver = AIPlayerDriver(state, _settings(enabled=False))
        driver.set_color(Color.WHITE)
        driver.set_difficulty(Difficulty.EASY)
        driver.set_enabled(True)

        assert driver.ai_color == Color.WHITE
        assert driver.difficulty == Difficulty.EASY
        assert driver.tick()
        assert state.side_to_move == Color.BLACK
        driver.stop()

    def test_rejects_bad_interval(self) -> None:
        with pytest.raises(ValueError):
            AIPlayerDriver(GameState(), _settings(tick_interval_ms=0))

    def test_ai_versus_ai(self) -> None:
        state = GameState()
        white = AIPlayerDriver(state, _settings(ai_color=Color.WHITE, seed=1))
        black = AIPlayerDriver(state, _settings(ai_color=Color.BLACK, seed=2))
        for _ in range(3):
            assert white.tick()
            assert not white.tick()
            assert black.tick()
        assert state.ply_count == 6
        white.stop()
        black.stop()
