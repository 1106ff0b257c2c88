from __future__ import annotations
from typing import Iterator, Optional, List, Tuple

from gravity_board.core.board import Board
from gravity_board.types import Coord, Player

# (d_row, d_col) for each axis, in the order they are checked.
# Runs are read along the direction: left->right, bottom->top, and top->bottom
# for both diagonals.
AXES: Tuple[Tuple[int, int], ...] = (
    (0, 1),    # horizontal
    (-1, 0),   # vertical
    (1, 1),    # diagonal down-right
    (1, -1),   # diagonal down-left
)


def _in_bounds(board: Board, r: int, c: int) -> bool:
    return 0 <= r < board.rows and 0 <= c < board.cols


def _run_through(board: Board, row: int, col: int, dr: int, dc: int) -> Tuple[List[Coord], int]:
    """
    Collect the run of equal marks through (row, col) along one axis.
    Returns the run (in axis order) and the anchor's index inside it.
    """
    g = board.grid
    p = g[row][col]

    r, c = row, col
    while _in_bounds(board, r - dr, c - dc) and g[r - dr][c - dc] == p:
        r, c = r - dr, c - dc

    run: List[Coord] = []
    while _in_bounds(board, r, c) and g[r][c] == p:
        run.append((r, c))
        r, c = r + dr, c + dc

    return run, run.index((row, col))


def find_winning_line(board: Board, row: int, col: int, win_length: int) -> Optional[List[Coord]]:
    """
    Win check anchored at the most recently filled cell.

    Only lines through (row, col) are inspected. When the run along an axis is
    longer than ``win_length`` the earliest window that still contains the
    anchor is reported, so the highlighted line always includes the last move.
    """
    if board.grid[row][col] is None:
        return None

    for dr, dc in AXES:
        run, i = _run_through(board, row, col, dr, dc)
        if len(run) >= win_length:
            start = max(0, i - win_length + 1)
            return run[start : start + win_length]
    return None


def is_winning_drop(board: Board, col: int, player: Player, win_length: int) -> bool:
    """Would ``player`` win by dropping into ``col``? The board is left as it was."""
    row = board.drop(col, player)
    try:
        return find_winning_line(board, row, col, win_length) is not None
    finally:
        board.undo(col)


def winning_lines(board: Board, win_length: int) -> Iterator[Tuple[Player, List[Coord]]]:
    """
    Whole-board scan, for callers that hold a board but no last move.
    Yields every qualifying run in AXES order, capped at win_length cells.
    """
    g = board.grid
    for dr, dc in AXES:
        for r in range(board.rows):
            for c in range(board.cols):
                p = g[r][c]
                if p is None:
                    continue
                # only start counting at the beginning of a run
                if _in_bounds(board, r - dr, c - dc) and g[r - dr][c - dc] == p:
                    continue
                line: List[Coord] = []
                rr, cc = r, c
                while _in_bounds(board, rr, cc) and g[rr][cc] == p and len(line) < win_length:
                    line.append((rr, cc))
                    rr, cc = rr + dr, cc + dc
                if len(line) == win_length:
                    yield p, line


def check_winner_with_line(board: Board, win_length: int) -> Optional[Tuple[Player, List[Coord]]]:
    return next(winning_lines(board, win_length), None)


def check_winner(board: Board, win_length: int) -> Optional[Player]:
    res = check_winner_with_line(board, win_length)
    return res[0] if res else None


def is_draw(board: Board, win_length: int) -> bool:
    return board.is_full() and check_winner(board, win_length) is None
