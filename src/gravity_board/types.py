# src/gravity_board/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]
Move = NewType("Move", int)   # 0-based column index
Coord = Tuple[int, int]       # (row, col), row 0 is the top
Status = Literal["waiting", "in_progress", "won", "draw"]
Outcome = Literal["win", "loss", "draw"]

PLAYER: Player = "X"
OPPONENT: Player = "O"
