from __future__ import annotations

import time
from dataclasses import dataclass, field

from gravity_board.game.engine import plan_move
from gravity_board.game.state import GameSession
from gravity_board.types import Move


@dataclass
class TacticalAgent:
    """
    Win/block agent:
      1) play an immediate winning move if available
      2) block the other side's immediate winning move
      3) otherwise the leftmost open column

    This is the mixed policy with skill pinned to 1, so it never plays randomly.
    """
    name: str = "Tactical"
    last_info: dict = field(init=False, default_factory=dict)

    def choose_move(self, session: GameSession) -> Move:
        t0 = time.perf_counter()
        move, reason = plan_move(session, skill=1.0)
        self.last_info = {
            "reason": reason,
            "move_col": int(move) + 1,
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        return move
