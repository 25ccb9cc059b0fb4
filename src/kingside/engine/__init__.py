"""Automated opponent: static move scoring, selection and the Qt timer driver."""

from kingside.engine.evaluation import (
    PIECE_VALUES,
    PROTECTION_VALUES,
    score_move,
    value_of,
)
from kingside.engine.models import Candidate, Difficulty, IMoveSelector
from kingside.engine.selector import MoveSelector
from kingside.engine.settings import EngineSettings
from kingside.engine.qt_bridge import AIPlayerDriver

__all__ = [
    "AIPlayerDriver",
    "Candidate",
    "Difficulty",
    "EngineSettings",
    "IMoveSelector",
    "MoveSelector",
    "PIECE_VALUES",
    "PROTECTION_VALUES",
    "score_move",
    "value_of",
]
