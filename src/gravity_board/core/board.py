# src/gravity_board/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from gravity_board.config import ROWS, COLS
from gravity_board.types import Cell, Player, Move


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, [row[:] for row in self.grid])

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def count_marks(self) -> int:
        return sum(1 for row in self.grid for p in row if p is not None)

    def lowest_empty_row(self, col: int) -> int:
        """Row a mark dropped into ``col`` would land on, or -1 if the column is full."""
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                return r
        return -1

    def drop(self, col: Move, player: Player) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")

        r = self.lowest_empty_row(c)
        if r < 0:
            raise ValueError("Column is full.")
        self.grid[r][c] = player
        return r

    def undo(self, col: Move) -> None:
        """
        Remove the top-most piece from a column.
        Used when simulating drops.
        """
        c = int(col)
        for r in range(self.rows):
            if self.grid[r][c] is not None:
                self.grid[r][c] = None
                return
        raise ValueError("Cannot undo: column is empty.")
