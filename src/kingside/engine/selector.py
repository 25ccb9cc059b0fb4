"""Heuristic move selection for the automated opponent."""

from __future__ import annotations

import dataclasses
import logging
import random

from kingside.core.enums import Color
from kingside.engine.evaluation import score_move
from kingside.engine.models import Candidate, Difficulty
from kingside.game.state import GameState

_LOGGER = logging.getLogger(__name__)

MEDIUM_TOP_N = 3

# Easy falls back through progressively less safe pools: (min score, inclusive).
_EASY_POOLS: tuple[tuple[int, bool], ...] = (
    (0, True),
    (-400, False),
    (-700, False),
)


class MoveSelector:
    """Picks one move per AI turn from static single-ply scores.

    Only the state's public queries are used; the board is never mutated.
    There is no turn or game-over guard: the caller decides when to ask.

    Args:
        rng: Source of randomness for Easy and Medium. Pass a seeded
            ``random.Random`` for reproducible play.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    # -- Public API ---------------------------------------------------------

    def candidates(self, state: GameState, color: Color) -> list[Candidate]:
        """Every legal move for *color*, unscored, in board scan order."""
        moves: list[Candidate] = []
        for sq, piece in state.board.pieces(color):
            for to_sq in sorted(state.legal_moves(sq)):
                moves.append(
                    Candidate(
                        from_sq=sq,
                        to_sq=to_sq,
                        piece=piece,
                        captured=state.get_piece_at(to_sq),
                    )
                )
        return moves

    def score_all(
        self, state: GameState, color: Color, difficulty: Difficulty
    ) -> list[Candidate]:
        """Candidates for *color* with their *difficulty* scores filled in."""
        return [
            dataclasses.replace(c, score=score_move(state, c, difficulty))
            for c in self.candidates(state, color)
        ]

    def select_move(
        self, state: GameState, color: Color, difficulty: Difficulty
    ) -> Candidate | None:
        """Choose a move for *color*, or ``None`` when it has no legal move."""
        scored = self.score_all(state, color, difficulty)
        if not scored:
            _LOGGER.debug("No legal move for %s", color)
            return None

        if difficulty == Difficulty.EASY:
            choice = self._pick_easy(scored)
        elif difficulty == Difficulty.MEDIUM:
            choice = self._pick_medium(scored)
        else:
            choice = self._pick_hard(scored)

        _LOGGER.debug(
            "%s (%s) picked %s from %d candidates",
            color,
            difficulty.name.lower(),
            choice,
            len(scored),
        )
        return choice

    # -- Tier selection -----------------------------------------------------

    def _pick_easy(self, scored: list[Candidate]) -> Candidate:
        for threshold, inclusive in _EASY_POOLS:
            pool = [
                c
                for c in scored
                if c.score > threshold or (inclusive and c.score == threshold)
            ]
            if pool:
                return self._rng.choice(pool)
        return self._rng.choice(scored)

    def _pick_medium(self, scored: list[Candidate]) -> Candidate:
        ranked = sorted(scored, key=lambda c: c.score, reverse=True)
        return self._rng.choice(ranked[:MEDIUM_TOP_N])

    @staticmethod
    def _pick_hard(scored: list[Candidate]) -> Candidate:
        # max() keeps the first of equal scores: ties go to enumeration order.
        return max(scored, key=lambda c: c.score)
