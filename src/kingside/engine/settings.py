"""Automated-opponent settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from kingside.core.enums import Color
from kingside.engine.models import Difficulty

ENV_PREFIX = "KINGSIDE_AI_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass
class EngineSettings:
    """All user-configurable AI settings."""

    enabled: bool = False
    ai_color: Color = Color.BLACK
    difficulty: Difficulty = Difficulty.MEDIUM
    tick_interval_ms: int = 700  # poll cadence, independent of board size
    seed: int | None = None

    def validate(self) -> None:
        if self.tick_interval_ms <= 0:
            raise ValueError(
                f"tick_interval_ms must be positive, got {self.tick_interval_ms}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineSettings:
        """Defaults overridden by ``KINGSIDE_AI_*`` variables.

        Recognised: ``ENABLED``, ``COLOR`` (white/black), ``DIFFICULTY``
        (easy/medium/hard or 1-3), ``TICK_MS`` and ``SEED``.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        enabled = env.get(ENV_PREFIX + "ENABLED")
        if enabled is not None:
            settings.enabled = enabled.strip().lower() in _TRUE_VALUES

        color = env.get(ENV_PREFIX + "COLOR")
        if color is not None:
            settings.ai_color = _parse_color(color)

        difficulty = env.get(ENV_PREFIX + "DIFFICULTY")
        if difficulty is not None:
            settings.difficulty = _parse_difficulty(difficulty)

        tick = env.get(ENV_PREFIX + "TICK_MS")
        if tick is not None:
            settings.tick_interval_ms = _parse_int(tick, "TICK_MS")

        seed = env.get(ENV_PREFIX + "SEED")
        if seed is not None:
            settings.seed = _parse_int(seed, "SEED")

        settings.validate()
        return settings


def _parse_color(value: str) -> Color:
    try:
        return Color[value.strip().upper()]
    except KeyError:
        raise ValueError(f"Invalid AI color: {value!r}") from None


def _parse_difficulty(value: str) -> Difficulty:
    text = value.strip()
    if text.isdigit():
        try:
            return Difficulty(int(text))
        except ValueError:
            raise ValueError(f"Invalid AI difficulty: {value!r}") from None
    try:
        return Difficulty[text.upper()]
    except KeyError:
        raise ValueError(f"Invalid AI difficulty: {value!r}") from None


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}") from None
