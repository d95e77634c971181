'''
Cows and Bulls API (in-memory)

Endpoints:
POST   /games                -> start a game
GET    /games/{id}           -> read state & hint grid
POST   /games/{id}/guess     -> submit a guess
GET    /games/{id}/hints     -> hint grid only
POST   /games/{id}/restart   -> new secret, same id
DELETE /games/{id}           -> quit

Games live in process memory; nothing survives a restart of the server.
'''

from fastapi import FastAPI, HTTPException, Depends, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import load_settings
from .engine import parse_guess, render_hint_grid
from .store import GameStore, GameState, GameFinishedError, read_hint_grid, read_try_count

from .schemas import (
    NewGameResponse,
    GuessRequest,
    GuessResponse,
    GameStateOut,
    HintsOut,
)

app = FastAPI(title="Cows and Bulls API", version="1.0.0")

# Allow everything so the interactive docs and browser clients on other origins can call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# One store per app; routes get it through a dependency so tests can swap it
app.state.store = GameStore(load_settings())


def get_store(request: Request) -> GameStore:
    return request.app.state.store


def _hints_out(game: GameState) -> HintsOut:
    grid = read_hint_grid(game)
    return HintsOut(
        grid=[[hint.value for hint in row] for row in grid],
        table=render_hint_grid(grid),
    )


def _get_or_404(store: GameStore, game_id: str) -> GameState:
    game = store.get(game_id)
    if not game:
        raise HTTPException(status_code=404, detail="Game not found")
    return game

# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(store: GameStore = Depends(get_store)) -> NewGameResponse:
    game = store.create()
    return NewGameResponse(game_id=game.id, tries=read_try_count(game), status=game.status)


@app.get("/games/{game_id}", response_model=GameStateOut, summary="Get current game state")
def get_game(game_id: str, store: GameStore = Depends(get_store)) -> GameStateOut:
    game = _get_or_404(store, game_id)
    return GameStateOut(
        game_id=game.id,
        tries=read_try_count(game),
        status=game.status,
        hints=_hints_out(game),
    )


@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    # payload.guess is already 4 numerals (schema validator)
    try:
        result = store.guess(game_id, parse_guess(payload.guess))
    except GameFinishedError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    if result is None:
        raise HTTPException(status_code=404, detail="Game not found")

    # Only reveal the secret once the player has it anyway
    return GuessResponse(
        cows=result.cows,
        bulls=result.bulls,
        tries=result.tries,
        status="won" if result.won else "in_progress",
        message=result.message,
        secret=payload.guess if result.won else None,
    )


@app.get("/games/{game_id}/hints", response_model=HintsOut, summary="Get the hint grid")
def get_hints(game_id: str, store: GameStore = Depends(get_store)) -> HintsOut:
    return _hints_out(_get_or_404(store, game_id))


@app.post("/games/{game_id}/restart", response_model=NewGameResponse, summary="Restart a game")
def restart_game(game_id: str, store: GameStore = Depends(get_store)) -> NewGameResponse:
    game = store.restart(game_id)
    if not game:
        raise HTTPException(status_code=404, detail="Game not found")
    return NewGameResponse(game_id=game.id, tries=read_try_count(game), status=game.status)


@app.delete("/games/{game_id}", summary="Quit a game")
def quit_game(game_id: str, store: GameStore = Depends(get_store)) -> dict:
    if not store.delete(game_id):
        raise HTTPException(status_code=404, detail="Game not found")
    return {"message": "Game deleted."}
