from __future__ import annotations
from typing import Protocol

from gravity_board.game.state import GameSession
from gravity_board.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, session: GameSession) -> Move:
        ...
