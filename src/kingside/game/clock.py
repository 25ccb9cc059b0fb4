"""Two-sided game clock charged on transitions."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from kingside.core.enums import Color
from kingside.game.interfaces import IClock, TimeControl

TimeSource = Callable[[], float]


@dataclass(frozen=True, slots=True)
class ClockSnapshot:
    """Read-only view of the clock for display."""

    white_remaining: float
    black_remaining: float
    is_active: bool


class GameClock(IClock):
    """Per-side remaining time, an active flag and the last sample time.

    Uses monotonic time by default. Remaining time may go negative; flag
    fall is the host's decision.
    """

    __slots__ = (
        "_time_control",
        "_remaining",
        "_active",
        "_last_sample",
        "_time_source",
    )

    def __init__(
        self,
        time_control: TimeControl | None = None,
        time_source: TimeSource = time.monotonic,
    ) -> None:
        self._time_control = time_control or TimeControl.classical_30m()
        self._time_source = time_source
        self._remaining: dict[Color, float] = {
            Color.WHITE: self._time_control.initial_seconds,
            Color.BLACK: self._time_control.initial_seconds,
        }
        self._active = False
        self._last_sample = time_source()

    # ── IClock implementation ────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self._active

    def start(self) -> None:
        if self._active:
            return
        self._last_sample = self._time_source()
        self._active = True

    def stop(self, color: Color) -> None:
        if not self._active:
            return
        self._charge(color)
        self._active = False

    def debit(self, color: Color) -> float:
        if not self._active:
            self._last_sample = self._time_source()
            return 0.0
        return self._charge(color)

    def remaining(self, color: Color) -> float:
        return self._remaining[color]

    def reset(self, time_control: TimeControl | None = None) -> None:
        if time_control is not None:
            self._time_control = time_control
        initial = self._time_control.initial_seconds
        self._remaining = {Color.WHITE: initial, Color.BLACK: initial}
        self._active = False
        self._last_sample = self._time_source()

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def time_control(self) -> TimeControl:
        return self._time_control

    @property
    def is_unlimited(self) -> bool:
        return self._time_control.initial_seconds == float("inf")

    def set_remaining(self, color: Color, seconds: float) -> None:
        """Manually override remaining time (for testing / UI override)."""
        self._remaining[color] = seconds

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            white_remaining=self._remaining[Color.WHITE],
            black_remaining=self._remaining[Color.BLACK],
            is_active=self._active,
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _charge(self, color: Color) -> float:
        now = self._time_source()
        elapsed = now - self._last_sample
        self._remaining[color] -= elapsed
        self._last_sample = now
        return elapsed
