from __future__ import annotations

from gravity_board.game.state import GameSession
from gravity_board.types import Move


class HumanAgent:
    name = "Human"

    def choose_move(self, session: GameSession) -> Move:
        raise RuntimeError("HumanAgent.choose_move should never be called.")
