"""environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_CANDIES = 20
DEFAULT_CUSTOM_TRADES = 3
DEFAULT_LOG_FILE = "candyworks.log"


@dataclass
class Settings:
    max_candies: int = DEFAULT_MAX_CANDIES
    custom_trades: int = DEFAULT_CUSTOM_TRADES
    log_file: str = DEFAULT_LOG_FILE
    discord_token: str = ""


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from e


def load_settings() -> Settings:
    """Read settings from the environment (call load_dotenv first).

    Raises:
        ValueError: if a numeric variable is not an integer
    """
    return Settings(
        max_candies=_int_env("CANDYWORKS_MAX_CANDIES", DEFAULT_MAX_CANDIES),
        custom_trades=_int_env("CANDYWORKS_CUSTOM_TRADES", DEFAULT_CUSTOM_TRADES),
        log_file=os.getenv("CANDYWORKS_LOG_FILE", DEFAULT_LOG_FILE),
        discord_token=os.getenv("DISCORD_TOKEN", ""),
    )
