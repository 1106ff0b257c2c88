from __future__ import annotations

import random
import time
from dataclasses import dataclass, field

from gravity_board.game.engine import plan_move
from gravity_board.game.state import GameSession
from gravity_board.types import Move


@dataclass
class SkillAgent:
    """
    Skill-parameterized opponent.

    Takes a winning column whenever one exists and blocks the other side's
    immediate win. Otherwise plays a random open column with probability
    ``1 - skill`` and the leftmost open column the rest of the time.

    skill:
      0.0 -> random play apart from wins/blocks
      1.0 -> fully deterministic (same as TacticalAgent)
    """
    name: str = "Skill"
    skill: float = 0.5
    seed: int | None = None
    rng: random.Random = field(init=False)
    last_info: dict = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        if not 0.0 <= self.skill <= 1.0:
            raise ValueError(f"skill must be within [0, 1] (got {self.skill}).")
        self.rng = random.Random(self.seed)

    def choose_move(self, session: GameSession) -> Move:
        t0 = time.perf_counter()
        move, reason = plan_move(session, self.skill, self.rng)
        self.last_info = {
            "reason": reason,
            "move_col": int(move) + 1,
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
            "skill": self.skill,
        }
        return move
