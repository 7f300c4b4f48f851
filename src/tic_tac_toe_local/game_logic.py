"""
Game logic for Tic Tac Toe (win/draw evaluation, move application, reset).
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .models import BOARD_CELLS, GameSnapshot, Mark, Outcome

logger = logging.getLogger(__name__)

# Scan order matters: rows, then columns, then diagonals.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class InvalidIndexError(ValueError):
    """Raised when a move targets an index outside the board."""


# PUBLIC_INTERFACE
def evaluate(board: Sequence[Optional[str]]) -> Outcome:
    """
    Examines board. Returns the first winning line in scan order, a draw for a
    full board, or in-progress otherwise. Does not check board legality.
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(board)}.")

    for a, b, c in WINNING_LINES:
        if board[a] and board[a] == board[b] == board[c]:
            return Outcome.win(Mark(board[a]), (a, b, c))

    if all(board):
        return Outcome.draw()

    return Outcome.in_progress()


class GameState:
    """Authoritative board, turn flag and outcome for one local game."""

    def __init__(self):
        self._board: List[Optional[Mark]] = [None] * BOARD_CELLS
        self._next_turn = Mark.X
        self._outcome = Outcome.in_progress()

    @property
    def board(self) -> Tuple[Optional[Mark], ...]:
        return tuple(self._board)

    @property
    def next_turn(self) -> Mark:
        return self._next_turn

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def finished(self) -> bool:
        return self._outcome.finished

    @property
    def is_empty(self) -> bool:
        return not any(self._board)

    def empty_cells(self) -> List[int]:
        return [i for i, cell in enumerate(self._board) if cell is None]

    # PUBLIC_INTERFACE
    def apply_move(self, index: int) -> bool:
        """
        Place the current mark at index.
        Returns True if applied, False if the cell is taken or the game is over.
        Raises InvalidIndexError for an index outside 0-8.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidIndexError(f"Cell index must be an int, got {index!r}.")
        if not 0 <= index < BOARD_CELLS:
            raise InvalidIndexError(f"Cell index {index} out of range 0-{BOARD_CELLS - 1}.")

        if self._outcome.finished:
            logger.debug("Rejected move at %d: game already finished", index)
            return False
        if self._board[index] is not None:
            logger.debug("Rejected move at %d: cell occupied by %s", index, self._board[index].value)
            return False

        mark = self._next_turn
        self._board[index] = mark
        self._next_turn = mark.opposite()
        self._outcome = evaluate(self._board)
        logger.info("%s played cell %d", mark.value, index)

        if self._outcome.winner is not None:
            logger.info("%s wins on line %s", self._outcome.winner.value, self._outcome.line)
        elif self._outcome.finished:
            logger.info("Game ended in a draw")
        return True

    # PUBLIC_INTERFACE
    def reset(self) -> None:
        """Clear the board, give X the first move, and recompute the outcome."""
        self._board = [None] * BOARD_CELLS
        self._next_turn = Mark.X
        self._outcome = evaluate(self._board)
        logger.info("Board reset")

    # PUBLIC_INTERFACE
    def current_state(self) -> GameSnapshot:
        """Copy of board, turn and outcome for rendering."""
        return GameSnapshot(
            board=list(self._board),
            next_turn=self._next_turn,
            outcome=self._outcome,
            finished=self._outcome.finished,
        )
