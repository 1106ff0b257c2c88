# src/gravity_board/config.py

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Final, Tuple


def env_flag(name: str, *, default: bool = False) -> bool:
    """Read a boolean toggle from the environment.

    ``1/true/yes/on`` and ``0/false/no/off`` are understood (case-insensitive);
    anything else, or an unset variable, falls back to ``default``.
    """
    value = os.getenv(name)
    if value is None:
        return default

    normalised = value.strip().lower()
    if normalised in {"1", "true", "yes", "on"}:
        return True
    if normalised in {"0", "false", "no", "off"}:
        return False
    return default


def env_int(name: str, *, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def env_str(name: str, *, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


# Board presets: name -> (rows, cols, win_length)
BOARD_PRESETS: Final[Dict[str, Tuple[int, int, int]]] = {
    "classic": (3, 3, 3),
    "connect4": (6, 7, 4),
}
DEFAULT_PRESET: Final[str] = "connect4"

ROWS: Final[int] = env_int("GRAVITY_BOARD_ROWS", default=BOARD_PRESETS[DEFAULT_PRESET][0])
COLS: Final[int] = env_int("GRAVITY_BOARD_COLS", default=BOARD_PRESETS[DEFAULT_PRESET][1])
CONNECT_N: Final[int] = env_int("GRAVITY_BOARD_CONNECT_N", default=BOARD_PRESETS[DEFAULT_PRESET][2])

# UI toggles
USE_COLOR: Final[bool] = env_flag("GRAVITY_BOARD_USE_COLOR", default=True)
CLEAR_SCREEN: Final[bool] = env_flag("GRAVITY_BOARD_CLEAR_SCREEN", default=True)

# “AI thinking” effect; the delay itself comes from the difficulty
AI_THINKING_SPINNER: Final[bool] = env_flag("GRAVITY_BOARD_AI_SPINNER", default=True)

LOG_LEVEL: Final[str] = env_str("GRAVITY_BOARD_LOG_LEVEL", default="WARNING")


@dataclass(frozen=True)
class Difficulty:
    name: str
    skill: float           # probability of skipping the random branch
    ai_delay_sec: float
    max_score: int
    time_bonus: float      # weight of the time-remaining bonus in a win
    time_limit_sec: int


DIFFICULTIES: Final[Dict[str, Difficulty]] = {
    "easy": Difficulty("easy", skill=0.30, ai_delay_sec=1.0, max_score=1000, time_bonus=0.2, time_limit_sec=30),
    "medium": Difficulty("medium", skill=0.60, ai_delay_sec=0.8, max_score=2000, time_bonus=0.3, time_limit_sec=25),
    "hard": Difficulty("hard", skill=0.80, ai_delay_sec=0.6, max_score=3000, time_bonus=0.4, time_limit_sec=20),
    "extreme": Difficulty("extreme", skill=0.95, ai_delay_sec=0.4, max_score=5000, time_bonus=0.5, time_limit_sec=15),
}
DEFAULT_DIFFICULTY: Final[str] = "easy"


def get_difficulty(name: str) -> Difficulty:
    key = name.strip().lower()
    if key not in DIFFICULTIES:
        raise KeyError(f"Unknown difficulty {name!r}. Choose one of: {', '.join(DIFFICULTIES)}")
    return DIFFICULTIES[key]


# League defaults
LEAGUE_GAMES_PER_PAIR: Final[int] = 20
LEAGUE_SEED: Final[int] = 1234
LEAGUE_Z: Final[float] = 1.28
