"""Kingside — chess rules, game state machine and a heuristic AI opponent."""

__version__ = "0.1.0"
