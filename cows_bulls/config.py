"""
Single place to:
- Load a local .env if present
- Read game settings from env vars
- Fail early (RuntimeError) on values we can't use

Settings:
  COWS_BULLS_RANDOM_SOURCE   "local" (default) or "random.org"
  COWS_BULLS_RANDOM_TIMEOUT  seconds to wait for random.org (default 3.0)
  COWS_BULLS_LOG_LEVEL       console log level (default WARNING)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

RANDOM_SOURCES = ("local", "random.org")


@dataclass(frozen=True)
class Settings:
    random_source: str = "local"
    random_timeout: float = 3.0
    log_level: str = "WARNING"


def load_settings(env: Optional[dict] = None) -> Settings:
    # dev convenience; a real shell can still override anything in .env
    if env is None:
        load_dotenv()
        env = os.environ

    random_source = env.get("COWS_BULLS_RANDOM_SOURCE", "local").strip().lower()
    if random_source not in RANDOM_SOURCES:
        raise RuntimeError(
            f"COWS_BULLS_RANDOM_SOURCE must be one of {', '.join(RANDOM_SOURCES)}, "
            f"got {random_source!r}."
        )

    raw_timeout = env.get("COWS_BULLS_RANDOM_TIMEOUT", "3.0")
    try:
        random_timeout = float(raw_timeout)
    except ValueError:
        raise RuntimeError(f"COWS_BULLS_RANDOM_TIMEOUT must be a number, got {raw_timeout!r}.")
    if random_timeout <= 0:
        raise RuntimeError("COWS_BULLS_RANDOM_TIMEOUT must be greater than zero.")

    log_level = env.get("COWS_BULLS_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"COWS_BULLS_LOG_LEVEL is not a logging level: {log_level!r}.")

    return Settings(
        random_source=random_source,
        random_timeout=random_timeout,
        log_level=log_level,
    )
