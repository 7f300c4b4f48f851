"""
View helpers for the browser UI: status line, grid rows, highlighted cells and
the compact-layout flag. Everything here is derived from a GameSnapshot and
never written back into the game.
"""

from typing import List, Optional

from .models import BOARD_CELLS, BoardView, CellView, GameSnapshot, OutcomeStatus

DEFAULT_COMPACT_BREAKPOINT = 500
ROW_SIZE = 3


# PUBLIC_INTERFACE
def status_text(snapshot: GameSnapshot) -> str:
    outcome = snapshot.outcome
    if outcome.status is OutcomeStatus.WIN:
        return f"Winner: {outcome.winner.value}"
    if outcome.status is OutcomeStatus.DRAW:
        return "Draw!"
    return f"Current Turn: {snapshot.next_turn.value}"


# PUBLIC_INTERFACE
def highlighted_cells(snapshot: GameSnapshot) -> List[int]:
    """Indices of the winning line, empty unless the game was won."""
    return list(snapshot.outcome.line or ())


# PUBLIC_INTERFACE
def cell_enabled(snapshot: GameSnapshot, index: int) -> bool:
    return snapshot.board[index] is None and not snapshot.finished


# PUBLIC_INTERFACE
def reset_enabled(snapshot: GameSnapshot) -> bool:
    # Reset stays available in every state, including an empty board.
    return True


# PUBLIC_INTERFACE
def is_compact_layout(viewport_width: Optional[int], breakpoint: int = DEFAULT_COMPACT_BREAKPOINT) -> bool:
    """True when the viewport is narrower than the breakpoint. Unknown width means full layout."""
    if viewport_width is None:
        return False
    return viewport_width < breakpoint


# PUBLIC_INTERFACE
def board_rows(snapshot: GameSnapshot) -> List[List[CellView]]:
    highlighted = set(highlighted_cells(snapshot))
    cells = [
        CellView(
            index=i,
            mark=snapshot.board[i],
            enabled=cell_enabled(snapshot, i),
            highlighted=i in highlighted,
        )
        for i in range(BOARD_CELLS)
    ]
    return [cells[r:r + ROW_SIZE] for r in range(0, BOARD_CELLS, ROW_SIZE)]


# PUBLIC_INTERFACE
def build_view(
    snapshot: GameSnapshot,
    viewport_width: Optional[int] = None,
    breakpoint: int = DEFAULT_COMPACT_BREAKPOINT,
) -> BoardView:
    """Bundle the snapshot with every derived presentation property."""
    return BoardView(
        state=snapshot,
        status=status_text(snapshot),
        rows=board_rows(snapshot),
        highlighted=highlighted_cells(snapshot),
        compact=is_compact_layout(viewport_width, breakpoint),
        reset_enabled=reset_enabled(snapshot),
    )
