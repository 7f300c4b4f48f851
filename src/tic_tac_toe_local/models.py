"""
Models for the local Tic Tac Toe game (board, outcome, snapshots and API payloads).
"""

from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


BOARD_CELLS = 9


class Mark(str, Enum):
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


class OutcomeStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


# PUBLIC_INTERFACE
class Outcome(BaseModel):
    """Resolution of a board: in progress, a win with its line, or a draw."""
    model_config = ConfigDict(frozen=True)

    status: OutcomeStatus = Field(OutcomeStatus.IN_PROGRESS, description="Current resolution state.")
    winner: Optional[Mark] = Field(None, description="Winning mark, set only for a win.")
    line: Optional[Tuple[int, int, int]] = Field(None, description="Board indices of the winning line.")

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls()

    @classmethod
    def win(cls, mark: Mark, line: Tuple[int, int, int]) -> "Outcome":
        return cls(status=OutcomeStatus.WIN, winner=mark, line=tuple(line))

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(status=OutcomeStatus.DRAW)

    @property
    def finished(self) -> bool:
        return self.status is not OutcomeStatus.IN_PROGRESS


# PUBLIC_INTERFACE
class GameSnapshot(BaseModel):
    """Read-only copy of the game for rendering."""
    model_config = ConfigDict(frozen=True)

    board: List[Optional[Mark]] = Field(
        ..., min_length=BOARD_CELLS, max_length=BOARD_CELLS,
        description="Row-major cells, values are 'X', 'O', or null.",
    )
    next_turn: Mark = Field(..., description="Mark that moves next (meaningful only while in progress).")
    outcome: Outcome
    finished: bool = Field(..., description="Whether the game is over.")


# PUBLIC_INTERFACE
class MoveRequest(BaseModel):
    """Cell activation coming from the UI."""
    index: int = Field(..., ge=0, le=BOARD_CELLS - 1, description="Cell index (0-8), row-major.")


# PUBLIC_INTERFACE
class MoveResult(BaseModel):
    """Whether a move was applied, plus the state after it."""
    applied: bool
    state: GameSnapshot


# PUBLIC_INTERFACE
class CellView(BaseModel):
    """One rendered cell."""
    index: int
    mark: Optional[Mark] = None
    enabled: bool
    highlighted: bool


# PUBLIC_INTERFACE
class BoardView(BaseModel):
    """Snapshot plus the presentation properties derived from it."""
    state: GameSnapshot
    status: str = Field(..., description="Status line, e.g. 'Current Turn: X'.")
    rows: List[List[CellView]]
    highlighted: List[int] = Field(default_factory=list)
    compact: bool = Field(False, description="Viewport is narrower than the compact breakpoint.")
    reset_enabled: bool = True
