"""
Two-player local Tic Tac Toe: game engine plus the API the browser UI renders from.
"""

from .game_logic import WINNING_LINES, GameState, InvalidIndexError, evaluate
from .models import GameSnapshot, Mark, Outcome, OutcomeStatus

__all__ = [
    "WINNING_LINES",
    "GameState",
    "InvalidIndexError",
    "evaluate",
    "GameSnapshot",
    "Mark",
    "Outcome",
    "OutcomeStatus",
]
