"""Game management layer — state machine and clock.

Quick start::

    from kingside.core import parse_square
    from kingside.game import GameState

    state = GameState()
    state.execute_move(parse_square("e2"), parse_square("e4"))
    state.get_game_status()  # "Black to move"
"""

from kingside.game.clock import ClockSnapshot, GameClock
from kingside.game.interfaces import IClock, TimeControl
from kingside.game.state import GameState

__all__ = [
    # Interfaces
    "IClock",
    "TimeControl",
    # Concrete
    "ClockSnapshot",
    "GameClock",
    "GameState",
]
