"""Static single-ply move scoring for the three difficulty tiers.

Every scorer plays the candidate on a scratch board and looks at the
result; nothing searches deeper than the move itself. "Attacked" always
means attacked by the mover's opponent on that scratch board.
"""

from __future__ import annotations

from collections.abc import Callable

from kingside.core.board import Board
from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.rules import Rules
from kingside.core.types import Square, is_center, is_inner_center
from kingside.engine.models import Candidate, Difficulty
from kingside.game.state import GameState

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 330,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 20_000,
}

# Penalty for leaving a piece en prise; the queen gets the most.
PROTECTION_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 50,
    PieceType.KNIGHT: 200,
    PieceType.BISHOP: 200,
    PieceType.ROOK: 350,
    PieceType.QUEEN: 800,
    PieceType.KING: 5_000,
}

EASY_SELF_CHECK_PENALTY = 500
EASY_QUEEN_HANG_PENALTY = 800
EASY_QUEEN_TRADE_THRESHOLD = 600

MEDIUM_SELF_CHECK_PENALTY = 1_000
MEDIUM_CENTER_BONUS = 10

HARD_SELF_CHECK_PENALTY = 1_500
HARD_CHECK_BONUS = 60
HARD_MATE_BONUS = 20_000
HARD_CENTER_BONUS = 15
HARD_INNER_CENTER_BONUS = 25
HARD_DEVELOPMENT_BONUS = 40
HARD_OPENING_PLIES = 10
HARD_MATERIAL_MARGIN = 20

_QUEEN_VALUE = PIECE_VALUES[PieceType.QUEEN]
_MINOR_PIECE_HOME_FILES: dict[PieceType, tuple[int, ...]] = {
    PieceType.KNIGHT: (1, 6),
    PieceType.BISHOP: (2, 5),
}
_HOME_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}

Scorer = Callable[[GameState, Candidate, Board], int]


def value_of(piece: Piece | None) -> int:
    """Material value, 0 for an empty square."""
    if piece is None:
        return 0
    return PIECE_VALUES[piece.piece_type]


def protection_of(piece: Piece) -> int:
    return PROTECTION_VALUES[piece.piece_type]


def _queen_en_prise_penalty() -> int:
    return _QUEEN_VALUE + PROTECTION_VALUES[PieceType.QUEEN]


def _is_attacked(scratch: Board, sq: Square, mover: Color) -> bool:
    return Rules.is_square_attacked(scratch, sq, mover.opposite)


def is_development_move(candidate: Candidate) -> bool:
    """A knight or bishop leaving its original square."""
    piece = candidate.piece
    files = _MINOR_PIECE_HOME_FILES.get(piece.piece_type)
    if files is None:
        return False
    from_sq = candidate.from_sq
    return from_sq.rank == _HOME_RANK[piece.color] and from_sq.file in files


# -- Tier scorers -----------------------------------------------------------


def score_easy(state: GameState, candidate: Candidate, scratch: Board) -> int:
    """Near-zero scores that only flag self-check and a hanging queen."""
    mover = candidate.piece.color
    score = 0

    if Rules.is_in_check(scratch, mover):
        score -= EASY_SELF_CHECK_PENALTY

    if candidate.piece.piece_type == PieceType.QUEEN and _is_attacked(
        scratch, candidate.to_sq, mover
    ):
        if value_of(candidate.captured) < EASY_QUEEN_TRADE_THRESHOLD:
            score -= EASY_QUEEN_HANG_PENALTY
    return score


def score_medium(state: GameState, candidate: Candidate, scratch: Board) -> int:
    """Captured material, a flat centre bonus and en-prise penalties."""
    piece = candidate.piece
    mover = piece.color
    score = value_of(candidate.captured)

    if Rules.is_in_check(scratch, mover):
        score -= MEDIUM_SELF_CHECK_PENALTY

    if is_center(candidate.to_sq):
        score += MEDIUM_CENTER_BONUS

    if _is_attacked(scratch, candidate.to_sq, mover):
        if piece.piece_type == PieceType.QUEEN:
            score -= _queen_en_prise_penalty()
        elif value_of(piece) > value_of(candidate.captured):
            score -= protection_of(piece)
    return score


def score_hard(state: GameState, candidate: Candidate, scratch: Board) -> int:
    """Medium's terms plus checks, graded centre control and development."""
    piece = candidate.piece
    mover = piece.color
    opponent = mover.opposite
    captured_value = value_of(candidate.captured)
    score = captured_value

    # Material differential for a piece stepping onto a cheaper square.
    if piece.piece_type == PieceType.QUEEN:
        if candidate.captured is None or candidate.captured.piece_type != PieceType.QUEEN:
            score -= _QUEEN_VALUE + (_QUEEN_VALUE - captured_value) * 2
    elif value_of(piece) > captured_value + HARD_MATERIAL_MARGIN:
        score -= value_of(piece) - captured_value

    if _is_attacked(scratch, candidate.to_sq, mover):
        if piece.piece_type == PieceType.QUEEN:
            score -= _queen_en_prise_penalty()
        else:
            score -= protection_of(piece)

    if Rules.is_in_check(scratch, opponent):
        score += HARD_CHECK_BONUS
        if Rules.is_checkmate(scratch, opponent, state.castling):
            score += HARD_MATE_BONUS

    if Rules.is_in_check(scratch, mover):
        score -= HARD_SELF_CHECK_PENALTY

    if is_inner_center(candidate.to_sq):
        score += HARD_INNER_CENTER_BONUS
    elif is_center(candidate.to_sq):
        score += HARD_CENTER_BONUS

    if state.ply_count < HARD_OPENING_PLIES and is_development_move(candidate):
        score += HARD_DEVELOPMENT_BONUS
    return score


SCORERS: dict[Difficulty, Scorer] = {
    Difficulty.EASY: score_easy,
    Difficulty.MEDIUM: score_medium,
    Difficulty.HARD: score_hard,
}


def score_move(state: GameState, candidate: Candidate, difficulty: Difficulty) -> int:
    """Static score of *candidate* in *state* for *difficulty*."""
    scratch = Rules.simulate(state.board, candidate.from_sq, candidate.to_sq)
    return SCORERS[difficulty](state, candidate, scratch)
