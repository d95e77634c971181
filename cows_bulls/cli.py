"""
Interactive console game.

    $ cows-bulls
    Guess the number! (Enter 'q' to quit, 'h' for help)
    0 > 1234
    Found 1 cows and 1 bulls
    1 > s
    ...

The loop only reads lines and prints; every game decision goes through the
contract in store.py.
"""

import logging
from typing import Callable, Optional, Tuple

from .config import Settings, load_settings
from .engine import is_numerals, is_well_formed_guess, parse_guess, render_hint_grid
from .store import (
    GameState,
    new_game,
    has_unique_digits,
    is_winning_guess,
    score_guess,
    update_hints,
    read_hint_grid,
    read_try_count,
    feedback_message,
    win_message,
)

logger = logging.getLogger(__name__)

BANNER = "Guess the number! (Enter 'q' to quit, 'h' for help)"

HELP_TEXT = "\n".join([
    "r, restart    - Restart game",
    "q, quit, exit - Quit game",
    "h, help, ?    - This text",
    "s, stats      - Check out some hints on potential digit positions",
    "<NNNN>        - Enter four unique digits to guess the number and win",
])

QUIT_COMMANDS = ("q", "quit", "exit")
HELP_COMMANDS = ("h", "help", "?")
STATS_COMMANDS = ("s", "stats")
RESTART_COMMANDS = ("r", "restart")


def handle_guess(state: GameState, text: str) -> Tuple[str, bool]:
    """
    Play one numeric input against the game.
    Returns (what to print, whether the game was won).
    """
    if not is_well_formed_guess(text):
        return ("Number of four digits is needed", False)

    guess = parse_guess(text)

    if not has_unique_digits(state, guess):
        return ("Digits must be unique", False)

    if is_winning_guess(state, guess):
        return (win_message(state), True)

    cows, bulls = score_guess(state, guess)
    update_hints(state, guess, cows, bulls)
    return (feedback_message(cows, bulls), False)


def run(
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    settings: Optional[Settings] = None,
    make_game: Optional[Callable[[], GameState]] = None,
) -> int:
    """
    Main loop. Returns the number of games started (restarts included).
    read_line/write/make_game are swappable so tests can script a session.
    """
    if make_game is None:
        if settings is None:
            settings = load_settings()

        def make_game() -> GameState:
            return new_game(settings=settings)

    game = make_game()
    games_started = 1
    write(BANNER)

    while True:
        try:
            text = read_line(f"{read_try_count(game)} > ").strip()
        except (EOFError, KeyboardInterrupt):
            # Ctrl-D / Ctrl-C: leave quietly
            write("")
            break

        if text == "":
            continue

        if is_numerals(text):
            message, won = handle_guess(game, text)
            write(message)
            if won:
                break
            continue

        if text in QUIT_COMMANDS:
            break
        elif text in HELP_COMMANDS:
            write(HELP_TEXT)
        elif text in STATS_COMMANDS:
            write(render_hint_grid(read_hint_grid(game)))
        elif text in RESTART_COMMANDS:
            # Drop the old game entirely; the loop just carries on
            game = make_game()
            games_started += 1
            logger.debug("restarted; %d games this session", games_started)
            write(BANNER)
        else:
            write(f"Unknown command: \"{text}\". Enter 'h' for help")

    return games_started


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(settings=settings)


if __name__ == "__main__":
    main()
