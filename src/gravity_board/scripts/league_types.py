from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict


@dataclass(frozen=True)
class Team:
    name: str
    make: Callable[[], object]  # must be picklable (use functools.partial, not lambda)
    skill: float | None = None  # None for agents without a skill knob


def empty_reasons() -> Dict[str, int]:
    return {"win": 0, "block": 0, "random": 0, "fallback": 0}


@dataclass
class Agg:
    games: int = 0
    points: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    moves: int = 0
    time_ms: int = 0
    reasons: Dict[str, int] = field(default_factory=empty_reasons)
