"""
In-memory holder for the single local game session.
"""

import threading
from typing import Tuple

from .game_logic import GameState
from .models import GameSnapshot


class InMemoryStore:
    """Singleton-like owner of the one GameState the service plays on."""

    def __init__(self):
        self.game = GameState()
        self._lock = threading.Lock()

    # PUBLIC_INTERFACE
    def apply_move(self, index: int) -> Tuple[bool, GameSnapshot]:
        """Apply a move and return (applied, state after the attempt)."""
        with self._lock:
            applied = self.game.apply_move(index)
            return applied, self.game.current_state()

    # PUBLIC_INTERFACE
    def reset(self) -> GameSnapshot:
        with self._lock:
            self.game.reset()
            return self.game.current_state()

    # PUBLIC_INTERFACE
    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return self.game.current_state()


STORE = InMemoryStore()
