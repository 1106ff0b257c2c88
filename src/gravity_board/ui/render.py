from __future__ import annotations
from typing import Optional, Iterable, List, Set

from gravity_board.config import CLEAR_SCREEN
from gravity_board.core.board import Board
from gravity_board.types import Cell, Coord
from gravity_board.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if cell == "X":
        return c("X", FG_RED)
    return c("O", FG_YELLOW)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render_lines(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None,
                 win_length: int = 4) -> List[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()
    lines: List[str] = []

    lines.append(c(f"GRAVITY BOARD · connect {win_length}", BOLD))
    lines.append(c(status, FG_CYAN) if status else "")

    lines.append(c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM))

    for r in range(board.rows):
        parts = []
        for cidx in range(board.cols):
            p = _piece(board.grid[r][cidx])
            if (r, cidx) in hl:
                p = c(p, REVERSE)
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")

    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    lines.append(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None,
           win_length: int = 4) -> None:
    clear_screen()
    for line in render_lines(board, status, highlight, win_length):
        print(line)
