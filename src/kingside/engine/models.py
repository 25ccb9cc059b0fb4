"""Shared AI move-selection models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol

from kingside.core.types import square_name

if TYPE_CHECKING:
    from kingside.core.enums import Color
    from kingside.core.piece import Piece
    from kingside.core.types import Square
    from kingside.game.state import GameState


class Difficulty(IntEnum):
    """AI strength tier."""

    EASY = 1
    MEDIUM = 2
    HARD = 3


@dataclass(frozen=True, slots=True)
class Candidate:
    """A legal move considered by the AI, with its static score."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    score: int = 0

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)} ({self.score})"


class IMoveSelector(Protocol):
    """Protocol for move pickers used by the AI driver."""

    def select_move(
        self,
        state: GameState,
        color: Color,
        difficulty: Difficulty,
    ) -> Candidate | None: ...
