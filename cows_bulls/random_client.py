"""
- Secret generation with an optional HTTP source and a clear fallback
Shuffle the 10 digits 0..9 and keep the first 4, so every ordered pick of
4 unique digits is equally likely (10 * 9 * 8 * 7 = 5040 secrets).

Where the shuffle comes from:
- "local": Python's secure random (secrets.SystemRandom)
- "random.org": their sequence generator returns a random permutation of 0..9.
  If anything goes wrong (no internet, timeout, bad response), we fall back
  to the local shuffle so the game still starts.
"""

import logging
from secrets import SystemRandom
from typing import List, Optional

import requests

from .config import Settings, load_settings
from .types import Code, POSITIONS, DIGITS

logger = logging.getLogger(__name__)

SEQUENCE_URL = "https://www.random.org/sequences/"

_system_random = SystemRandom()


def local_shuffle() -> List[int]:
    digits = list(range(DIGITS))
    _system_random.shuffle(digits)
    return digits


def fetch_shuffle(timeout_seconds: float = 3.0) -> List[int]:
    """
    Ask random.org for a permutation of 0..9.
    Raises on any problem; generate() decides what to do about it.
    """
    # Parameters to send to random.org
    params = {
        "min": 0,          # smallest number in the sequence
        "max": DIGITS - 1, # largest number in the sequence
        "col": 1,          # one number per line
        "format": "plain", # plain text response
        "rnd": "new",      # always generate a new sequence
    }

    response = requests.get(SEQUENCE_URL, params=params, timeout=timeout_seconds)

    # If the response was not 200 OK, this will raise an error
    response.raise_for_status()

    # The body looks like:
    #   7\n0\n3\n9\n...
    digits = [int(line) for line in response.text.split() if line.strip()]

    # It has to be exactly the 10 digits, each once
    if sorted(digits) != list(range(DIGITS)):
        raise ValueError(f"random.org returned {digits!r}, expected a permutation of 0..9.")

    return digits


def generate(settings: Optional[Settings] = None) -> Code:
    """
    A fresh secret: 4 unique digits, leading zero allowed.
    Never fails.
    """
    if settings is None:
        settings = load_settings()

    if settings.random_source == "random.org":
        try:
            digits = fetch_shuffle(settings.random_timeout)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("random.org unavailable (%s); using local shuffle", exc)
            digits = local_shuffle()
    else:
        digits = local_shuffle()

    return digits[:POSITIONS]
