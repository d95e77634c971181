"""
Game state + in-memory store
- GameState holds one game: secret, try count, hint grid
- The module-level functions are the whole contract the console loop and
  the API use to play; callers own their GameState (no globals here)
- GameStore keeps many games in memory for the HTTP API
"""

import copy
import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Dict, Optional, Tuple
from uuid import uuid4

from . import engine
from .config import Settings
from .engine import is_well_formed_guess  # noqa: F401  re-exported for callers
from .random_client import generate
from .types import Code, GameStatus, HintGrid

logger = logging.getLogger(__name__)


class GameFinishedError(ValueError):
    """The game was already won; no more guesses."""


@dataclass
class GameState:
    id: str
    secret: Code
    tries: int = 0
    hint_grid: HintGrid = field(default_factory=engine.new_hint_grid)
    status: GameStatus = "in_progress"


@dataclass
class GuessResult:
    cows: int
    bulls: int
    won: bool
    tries: int
    message: str


def new_game(secret: Optional[Code] = None, settings: Optional[Settings] = None) -> GameState:
    # secret can be passed in so tests know the answer
    if secret is None:
        secret = generate(settings)
    return GameState(id=str(uuid4()), secret=list(secret))


def has_unique_digits(state: GameState, guess: Code) -> bool:
    return engine.has_unique_digits(guess)


def is_winning_guess(state: GameState, guess: Code) -> bool:
    # Checking for a win is free: it does not count as a try
    return engine.is_secret(state.secret, guess)


def score_guess(state: GameState, guess: Code) -> Tuple[int, int]:
    cows, bulls = engine.score(state.secret, guess)
    state.tries += 1
    return (cows, bulls)


def update_hints(state: GameState, guess: Code, cows: int, bulls: int) -> None:
    engine.update_hints(state.hint_grid, guess, cows, bulls)


def read_hint_grid(state: GameState) -> HintGrid:
    # A copy, so display code can't change what the game knows
    return copy.deepcopy(state.hint_grid)


def read_try_count(state: GameState) -> int:
    return state.tries


def feedback_message(cows: int, bulls: int) -> str:
    # Don't reveal which digits are cows or bulls
    if cows == 0 and bulls == 0:
        return "Nothing found"
    return f"Found {cows} cows and {bulls} bulls"


def win_message(state: GameState) -> str:
    # The winning guess is not scored, so it is the "+ 1"
    return f"You won in {read_try_count(state) + 1} tries!"


def play_turn(state: GameState, guess: Code) -> GuessResult:
    """
    One full turn for a well-formed guess:
    unique check -> win check -> score -> hints.
    Raises ValueError for repeated digits (try count is not touched).
    """
    if state.status != "in_progress":
        raise GameFinishedError("Game already won. Start a new game.")

    if not has_unique_digits(state, guess):
        raise ValueError("Digits must be unique")

    if is_winning_guess(state, guess):
        state.status = "won"
        logger.debug("game %s won after %d scored guesses", state.id, state.tries)
        return GuessResult(
            cows=0,
            bulls=len(guess),
            won=True,
            tries=state.tries + 1,
            message=win_message(state),
        )

    cows, bulls = score_guess(state, guess)
    update_hints(state, guess, cows, bulls)
    logger.debug("game %s try %d: %d cows, %d bulls", state.id, state.tries, cows, bulls)

    return GuessResult(
        cows=cows,
        bulls=bulls,
        won=False,
        tries=state.tries,
        message=feedback_message(cows, bulls),
    )


class GameStore:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._games: Dict[str, GameState] = {}
        self._lock = RLock()
        self._settings = settings

    def create(self, secret: Optional[Code] = None) -> GameState:
        game = new_game(secret, self._settings)
        with self._lock:
            self._games[game.id] = game
        logger.debug("created game %s", game.id)
        return game

    def get(self, game_id: str) -> Optional[GameState]:
        with self._lock:
            return self._games.get(game_id)

    def guess(self, game_id: str, attempt: Code) -> Optional[GuessResult]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            return play_turn(game, attempt)

    def restart(self, game_id: str, secret: Optional[Code] = None) -> Optional[GameState]:
        """
        Throw the old game away and start over under the same id.
        Nothing carries over: new secret, zero tries, empty grid.
        """
        if self.get(game_id) is None:
            return None

        # Generating may call random.org; keep the lock free meanwhile
        game = new_game(secret, self._settings)
        game.id = game_id

        with self._lock:
            # Deleted while we were generating
            if game_id not in self._games:
                return None
            self._games[game_id] = game
        logger.debug("restarted game %s", game_id)
        return game

    def delete(self, game_id: str) -> bool:
        with self._lock:
            return self._games.pop(game_id, None) is not None
