from __future__ import annotations

import random
import time
from dataclasses import dataclass, field

from gravity_board.game.state import GameSession
from gravity_board.types import Move


@dataclass
class RandomAgent:
    name: str = "Random AI"
    seed: int | None = None
    rng: random.Random = field(init=False)
    last_info: dict = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def choose_move(self, session: GameSession) -> Move:
        t0 = time.perf_counter()
        moves = session.board.valid_moves()
        if not moves:
            raise ValueError("No valid moves.")
        choice = self.rng.choice(moves)
        self.last_info = {
            "reason": "random",
            "move_col": int(choice) + 1,
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        return choice
