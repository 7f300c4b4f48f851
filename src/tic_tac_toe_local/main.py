import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .config import load_settings
from .game_logic import InvalidIndexError
from .models import BoardView, GameSnapshot, MoveRequest, MoveResult
from .presentation import build_view
from .store import STORE

settings = load_settings()
logging.basicConfig(level=settings.log_level, format="[%(levelname)s] %(message)s")

openapi_tags = [
    {"name": "game", "description": "Play moves, reset and read the board"},
    {"name": "view", "description": "Board state with derived presentation fields"},
]

app = FastAPI(
    title="Tic Tac Toe Local",
    description="Single-session API backing the two-player local Tic Tac Toe browser UI.",
    version="1.0.0",
    openapi_tags=openapi_tags
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def health_check():
    """Health check endpoint."""
    return {"message": "Healthy"}

# ---------------- Game API ---------------- #

# PUBLIC_INTERFACE
@app.get("/game/state", response_model=GameSnapshot, tags=["game"], summary="Get board, turn and outcome")
def get_game_state():
    """Current snapshot of the single local game."""
    return STORE.snapshot()

# PUBLIC_INTERFACE
@app.post("/game/move", response_model=MoveResult, tags=["game"], summary="Activate a cell")
def make_a_move(req: MoveRequest):
    """
    Place the current mark at req.index.
    An occupied cell or a finished game is not an error: applied is false and the state is unchanged.
    """
    try:
        applied, state = STORE.apply_move(req.index)
    except InvalidIndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MoveResult(applied=applied, state=state)

# PUBLIC_INTERFACE
@app.post("/game/reset", response_model=GameSnapshot, tags=["game"], summary="Reset the board")
def reset_game():
    """Empty the board and give X the first move. Always available."""
    return STORE.reset()

# --------------- Presentation --------------- #

# PUBLIC_INTERFACE
@app.get("/game/view", response_model=BoardView, tags=["view"], summary="Get board with view properties")
def get_game_view(viewport_width: Optional[int] = Query(None, ge=0, description="Viewport width in px")):
    """Snapshot plus status line, grid rows, winning highlight and compact-layout flag."""
    return build_view(STORE.snapshot(), viewport_width, settings.compact_breakpoint)
