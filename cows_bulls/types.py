"""
Labels for clarity.
"""

from enum import Enum
from typing import List, Literal

POSITIONS = 4   # digits in a secret / guess
DIGITS = 10     # digit values 0 -> 9

Digit = int  # 0 -> 9
Code = List[Digit]  # 4 digit secret or guess
GameStatus = Literal["in_progress", "won"]


class Hint(str, Enum):
    """
    Belief about one digit sitting at one position.
    The value is the symbol printed in the hint table.
    """
    UNKNOWN = " "
    MAYBE = "?"
    HERE = "+"
    NOT_HERE = "-"


HintGrid = List[List[Hint]]  # grid[digit][position], 10 rows x 4 columns
