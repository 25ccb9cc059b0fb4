"""Qt timer driver that plays the automated opponent's moves."""

from __future__ import annotations

import logging
import random

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from kingside.core.enums import Color
from kingside.engine.models import Difficulty, IMoveSelector
from kingside.engine.selector import MoveSelector
from kingside.engine.settings import EngineSettings
from kingside.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class AIPlayerDriver(QObject):
    """Polls the game on a fixed interval and submits one AI move per tick.

    The timer fires on the thread that owns the driver, so AI moves are
    serialized with human moves made from the same event loop. Each tick is
    bounded, synchronous work: either a full move is submitted or none is.
    """

    move_played = pyqtSignal(object, int)  # Candidate, MoveResult
    no_move_available = pyqtSignal(int)  # Color
    move_rejected = pyqtSignal(object)  # Candidate

    def __init__(
        self,
        state: GameState,
        settings: EngineSettings | None = None,
        selector: IMoveSelector | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or EngineSettings()
        self._settings.validate()
        self._state = state
        self._selector: IMoveSelector = selector or MoveSelector(
            random.Random(self._settings.seed)
        )
        self._timer = QTimer(self)
        self._timer.setInterval(self._settings.tick_interval_ms)
        self._timer.timeout.connect(self.tick)
        if self._settings.enabled:
            self._timer.start()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def ai_color(self) -> Color:
        return self._settings.ai_color

    @property
    def difficulty(self) -> Difficulty:
        return self._settings.difficulty

    def is_enabled(self) -> bool:
        return self._settings.enabled

    def is_running(self) -> bool:
        return self._timer.isActive()

    # ── Configuration ────────────────────────────────────────────────────

    def set_enabled(self, enabled: bool) -> None:
        if self._settings.enabled == enabled:
            return
        self._settings.enabled = enabled
        if enabled:
            self.start()
        else:
            self.stop()

    def set_color(self, color: Color) -> None:
        self._settings.ai_color = color

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self._settings.difficulty = difficulty

    def start(self) -> None:
        if not self._timer.isActive():
            self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    # ── Tick ─────────────────────────────────────────────────────────────

    @pyqtSlot()
    def tick(self) -> bool:
        """Play one AI move if it is the AI's turn. Returns whether it did."""
        state = self._state
        color = self._settings.ai_color
        if not self._settings.enabled:
            return False
        if state.side_to_move != color or state.is_game_over:
            return False

        choice = self._selector.select_move(state, color, self._settings.difficulty)
        if choice is None:
            _LOGGER.info("AI (%s) has no legal move", color)
            self.no_move_available.emit(int(color))
            return False

        result = state.execute_move(choice.from_sq, choice.to_sq)
        if not result.is_success:
            _LOGGER.warning("AI move %s was rejected", choice)
            self.move_rejected.emit(choice)
            return False

        _LOGGER.info("AI (%s) played %s -> %s", color, choice, result.name)
        self.move_played.emit(choice, int(result))
        return True
