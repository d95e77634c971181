"""
Pure game logic (no console, no HTTP, no storage).
For each guess we compute two feedback numbers:
- bulls: how many indices are exactly correct (right digit, right place)
- cows: how many digits appear in the secret but at a different place

We also keep a hint grid (digit x position) that records what a careful
player could deduce with pencil and paper. The grid is never used to score.

The secret always has 4 unique digits. Guesses are checked by the caller
(is_well_formed_guess, has_unique_digits) before they reach this module.
"""

from typing import Tuple

from .types import Code, Hint, HintGrid, POSITIONS, DIGITS


def is_numerals(text: str) -> bool:
    """
    Non-empty and every character an ASCII numeral 0 -> 9
    (str.isdigit() also lets superscripts through).
    """
    for char in text:
        if char < "0" or char > "9":
            return False
    return text != ""


def is_well_formed_guess(text: str) -> bool:
    # Exactly 4 numerals
    return len(text) == POSITIONS and is_numerals(text)


def parse_guess(text: str) -> Code:
    """
    "0123" -> [0, 1, 2, 3]
    Raises ValueError instead of crashing on input that slipped past
    is_well_formed_guess.
    """
    if not is_well_formed_guess(text):
        raise ValueError(f"Guess must be exactly {POSITIONS} digits, got {text!r}.")
    return [int(char) for char in text]


def has_unique_digits(guess: Code) -> bool:
    # Compare every pair once
    i = 0
    while i < POSITIONS:
        j = i + 1
        while j < POSITIONS:
            if guess[i] == guess[j]:
                return False
            j += 1
        i += 1
    return True


def is_secret(secret: Code, guess: Code) -> bool:
    """
    Win = all digits match in order.
    """
    i = 0
    while i < POSITIONS:
        if secret[i] != guess[i]:
            return False
        i += 1
    return True


def score(secret: Code, guess: Code) -> Tuple[int, int]:
    """
    Example:
      secret = [6, 4, 3, 7]
      guess  = [1, 2, 3, 4]
      bulls = 1  (the 3 is in place)
      cows  = 1  (the 4 is in the secret, but not at index 3)
      Returns a tuple: (cows, bulls)

    Cows count every (secret index, guess index) pair that matches at
    different indices. With a repeated digit in the guess (e.g. 4444) this
    counts the same secret digit more than once. That is how the game has
    always scored, so we keep it.
    """
    cows = 0
    bulls = 0

    for i in range(POSITIONS):
        # 1. Same digit at the same index --> bull
        if secret[i] == guess[i]:
            bulls += 1

        # 2. Same digit at another index --> cow
        for j in range(POSITIONS):
            if i != j and secret[i] == guess[j]:
                cows += 1

    return (cows, bulls)


def new_hint_grid() -> HintGrid:
    # 10 digits x 4 positions, nothing known yet
    return [[Hint.UNKNOWN for _ in range(POSITIONS)] for _ in range(DIGITS)]


def update_hints(grid: HintGrid, guess: Code, cows: int, bulls: int) -> None:
    """
    Add what we can learn from one scored guess to the grid (in place).
    The rules run in this order and later ones read what earlier ones wrote.
    """

    # 1. Nothing found: none of the guessed digits is in the secret
    if cows == 0 and bulls == 0:
        for digit in guess:
            for position in range(POSITIONS):
                grid[digit][position] = Hint.NOT_HERE

    # 2. Everything found: the 4 guessed digits are the secret's digits,
    #    so every other digit is out
    if cows + bulls == POSITIONS:
        for digit in range(DIGITS):
            if digit not in guess:
                for position in range(POSITIONS):
                    grid[digit][position] = Hint.NOT_HERE

    # 3. Some bulls: any guessed digit might be sitting in its place
    if bulls > 0:
        for position in range(POSITIONS):
            digit = guess[position]
            if grid[digit][position] == Hint.UNKNOWN:
                grid[digit][position] = Hint.MAYBE

    # 4. Only bulls: if the places we already ruled out plus the bulls
    #    cover all 4 positions, the still-unknown ones must be the bulls
    if cows == 0 and bulls > 0:
        ruled_out = 0
        for position in range(POSITIONS):
            if grid[guess[position]][position] == Hint.NOT_HERE:
                ruled_out += 1

        if ruled_out + bulls == POSITIONS:
            for position in range(POSITIONS):
                digit = guess[position]
                if grid[digit][position] == Hint.UNKNOWN:
                    grid[digit][position] = Hint.HERE

    # 5. Only cows: no guessed digit is in its guessed place
    elif cows > 0 and bulls == 0:
        for position in range(POSITIONS):
            digit = guess[position]
            if grid[digit][position] in (Hint.MAYBE, Hint.UNKNOWN):
                grid[digit][position] = Hint.NOT_HERE


def render_hint_grid(grid: HintGrid) -> str:
    """
    Table for the 'stats' command:
       1 2 3 4
    0:   - ?
    ...
    """
    lines = ["   " + " ".join(str(position + 1) for position in range(POSITIONS))]
    for digit in range(DIGITS):
        row = f"{digit}: "
        for position in range(POSITIONS):
            row += grid[digit][position].value + " "
        lines.append(row)
    return "\n".join(lines)
