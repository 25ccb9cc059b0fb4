"""Abstract interfaces and value types for the game layer.

:class:`~kingside.game.state.GameState` depends on :class:`IClock`, not on
the concrete clock, so hosts and tests can swap in their own time keeping.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from kingside.core.enums import Color

# ── Time control presets ─────────────────────────────────────────────────────


class TimeControl:
    """Immutable time-control definition.

    Args:
        initial_seconds: Starting time per player.
    """

    __slots__ = ("initial_seconds",)

    def __init__(self, initial_seconds: float) -> None:
        self.initial_seconds = initial_seconds

    # Common presets
    @classmethod
    def blitz_5m(cls) -> TimeControl:
        return cls(300)

    @classmethod
    def rapid_10m(cls) -> TimeControl:
        return cls(600)

    @classmethod
    def classical_30m(cls) -> TimeControl:
        """Default for a new game."""
        return cls(1800)

    @classmethod
    def unlimited(cls) -> TimeControl:
        """No time limit."""
        return cls(float("inf"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeControl):
            return NotImplemented
        return self.initial_seconds == other.initial_seconds

    def __hash__(self) -> int:
        return hash(self.initial_seconds)

    def __repr__(self) -> str:
        mins = self.initial_seconds / 60
        return f"TimeControl({mins:.0f}m)"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IClock(ABC):
    """Interface for a decrement-on-transition chess clock.

    Time is only charged when the owner samples it (``debit`` / ``stop``);
    no background ticking is required.
    """

    @property
    @abstractmethod
    def is_active(self) -> bool: ...

    @abstractmethod
    def start(self) -> None:
        """Activate the clock and take a fresh sample. No-op when active."""

    @abstractmethod
    def stop(self, color: Color) -> None:
        """Charge time elapsed since the last sample to *color* and pause."""

    @abstractmethod
    def debit(self, color: Color) -> float:
        """Charge elapsed time to *color* if active, resample, return seconds."""

    @abstractmethod
    def remaining(self, color: Color) -> float:
        """Seconds remaining for *color* as of the last sample."""

    @abstractmethod
    def reset(self, time_control: TimeControl | None = None) -> None:
        """Refill both sides and pause.

        Keeps the current time control when *time_control* is ``None``.
        """
