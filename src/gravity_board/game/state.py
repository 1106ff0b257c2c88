from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from gravity_board.config import CONNECT_N
from gravity_board.core.board import Board
from gravity_board.types import Coord, Player, Status, PLAYER


@dataclass(slots=True)
class GameSession:
    board: Board
    win_length: int = CONNECT_N
    current: Player = PLAYER
    status: Status = "waiting"
    winner: Optional[Player] = None
    winning_line: Optional[List[Coord]] = None
    last_move: Optional[Coord] = None
    last_status: str = field(default="Player X starts.", compare=False)

    @property
    def move_count(self) -> int:
        # recomputed from the board so it can never drift from the marks placed
        return self.board.count_marks()

    @property
    def is_over(self) -> bool:
        return self.status in ("won", "draw")

    def copy(self) -> "GameSession":
        return GameSession(
            board=self.board.copy(),
            win_length=self.win_length,
            current=self.current,
            status=self.status,
            winner=self.winner,
            winning_line=list(self.winning_line) if self.winning_line else None,
            last_move=self.last_move,
            last_status=self.last_status,
        )
