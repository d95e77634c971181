"""
Explicit validation & Pydantic models
- Models validate and serialize data exchanged between client and server.
- A guess is a 4-character string like "0123": malformed input is turned
  away here (422), so the engine only ever sees 4 digits.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .engine import is_well_formed_guess


# 1. Represents response when a new game is started (or restarted)
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; secret is never returned")
    tries: int = Field(..., description="Scored guesses so far")
    status: Literal["in_progress", "won"] = Field(..., description="Current state of the game")


# 2. Validates player's guess
class GuessRequest(BaseModel):
    guess: str = Field(..., description="Exactly 4 numerals, e.g. \"0123\". Digits must be unique.")

    @field_validator("guess")
    @classmethod
    def validate_digits(cls, guess: str) -> str:
        """
        We only check the shape here (4 characters, each 0..9).
        Unique digits are a game rule, the route checks that (400).
        """
        guess = guess.strip()
        if not is_well_formed_guess(guess):
            raise ValueError("Number of four digits is needed.")
        return guess

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": "1234"},
                {"guess": "0987"},
            ]
        }
    }


# 3. Hint grid for display: 10 rows (digits 0..9) of 4 symbols
class HintsOut(BaseModel):
    grid: List[List[str]] = Field(..., description="grid[digit][position]: ' ', '?', '+' or '-'")
    table: str = Field(..., description="Same grid rendered as text")


# 4. Represents the overall state of the game
class GameStateOut(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    tries: int = Field(..., description="Scored guesses so far")
    status: Literal["in_progress", "won"] = Field(..., description="Current state of the game")
    hints: HintsOut = Field(..., description="What the guesses so far tell us")


# 5. Result of a guess
class GuessResponse(BaseModel):
    cows: int = Field(..., description="Right digit, wrong position")
    bulls: int = Field(..., description="Right digit, right position")
    tries: int = Field(..., description="Scored guesses so far (or tries to win, once won)")
    status: Literal["in_progress", "won"] = Field(..., description="Current state of the game")
    message: str = Field(..., description="Feedback message")
    secret: Optional[str] = Field(None, description="The secret (only revealed once won)")
