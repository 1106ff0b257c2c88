from __future__ import annotations

import random
from typing import List, Literal, Optional, Sequence, Tuple

from gravity_board.config import ROWS, COLS, CONNECT_N
from gravity_board.core.board import Board
from gravity_board.core.rules import find_winning_line, is_draw, is_winning_drop, winning_lines
from gravity_board.errors import ColumnFull, GameAlreadyOver, InvalidColumn
from gravity_board.game.state import GameSession
from gravity_board.types import Cell, Move, Player, PLAYER, OPPONENT

Reason = Literal["win", "block", "random", "fallback"]


def other(player: Player) -> Player:
    return OPPONENT if player == PLAYER else PLAYER


def new_game(rows: int = ROWS, cols: int = COLS, win_length: int = CONNECT_N) -> GameSession:
    if rows < 1 or cols < 1:
        raise ValueError(f"Board must have at least one row and column (got {rows}x{cols}).")
    if win_length < 2:
        raise ValueError(f"win_length must be at least 2 (got {win_length}).")
    if win_length > min(rows, cols):
        raise ValueError(f"win_length {win_length} does not fit a {rows}x{cols} board.")

    return GameSession(
        board=Board(rows, cols),
        win_length=win_length,
        current=PLAYER,
        status="in_progress",
        last_status="Player X starts.",
    )


def load_session(grid: Sequence[Sequence[Cell]], win_length: int, current: Optional[Player] = None) -> GameSession:
    """
    Rebuild a session from a saved grid (row 0 is the top).

    The grid must be one a real game could reach: rectangular, only X/O/empty
    cells, no mark above an empty cell, X at most one mark ahead of O, and at
    most one side holding a line (the side that moved last). Status, winner
    and turn are derived from the marks. A finished session keeps the last
    mover as ``current``, as ``apply_move`` leaves it; otherwise ``current``
    defaults to the side whose turn it is by count (X moves first).
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    for r, row in enumerate(grid):
        if len(row) != cols:
            raise ValueError(f"Row {r} has {len(row)} cells, expected {cols}.")

    session = new_game(rows, cols, win_length)
    board = session.board
    board.grid = [list(row) for row in grid]

    for r, row in enumerate(board.grid):
        for c, cell in enumerate(row):
            if cell not in (None, PLAYER, OPPONENT):
                raise ValueError(f"Unknown mark {cell!r} at row {r}, column {c}.")

    for c in range(cols):
        seen_mark = False
        for r in range(rows):
            if board.grid[r][c] is not None:
                seen_mark = True
            elif seen_mark:
                raise ValueError(f"Column {c} has a gap under a mark at row {r}.")

    x_count = sum(row.count(PLAYER) for row in board.grid)
    o_count = sum(row.count(OPPONENT) for row in board.grid)
    if x_count - o_count not in (0, 1):
        raise ValueError(f"Impossible mark counts: {x_count} X against {o_count} O.")
    last_mover = PLAYER if x_count > o_count else OPPONENT

    lines = list(winning_lines(board, win_length))
    if len({p for p, _ in lines}) > 1:
        raise ValueError("Both sides have a winning line.")

    if lines:
        winner, line = lines[0]
        if winner != last_mover:
            raise ValueError(f"{winner} has a line but {last_mover} moved last.")
        session.status = "won"
        session.winner, session.winning_line = winner, line
        session.current = winner
    elif is_draw(board, win_length):
        session.status = "draw"
        session.current = last_mover
    else:
        session.current = current if current is not None else other(last_mover)
    return session


def apply_move(session: GameSession, column: int) -> GameSession:
    """
    Drop the side-to-move's mark into ``column``.

    Raises GameAlreadyOver, InvalidColumn or ColumnFull without touching the
    session; otherwise mutates and returns the same session.
    """
    if session.is_over:
        raise GameAlreadyOver("The game is already over.", column)

    board = session.board
    if isinstance(column, bool) or not isinstance(column, int) or not 0 <= column < board.cols:
        raise InvalidColumn(f"Column must be between 1 and {board.cols}.", column)
    if board.lowest_empty_row(column) < 0:
        raise ColumnFull(f"Column {column + 1} is full.", column)

    player = session.current
    row = board.drop(Move(column), player)
    session.last_move = (row, column)
    session.status = "in_progress"

    line = find_winning_line(board, row, column, session.win_length)
    if line is not None:
        session.status = "won"
        session.winner = player
        session.winning_line = line
    elif board.is_full():
        session.status = "draw"
    else:
        session.current = other(player)
    return session


def find_winning_move(board: Board, player: Player, win_length: int) -> Optional[Move]:
    """Leftmost column where ``player`` would complete a line right now."""
    for c in board.valid_moves():
        if is_winning_drop(board, c, player, win_length):
            return c
    return None


def plan_move(session: GameSession, skill: float, rng: Optional[random.Random] = None) -> Tuple[Move, Reason]:
    """
    Pick a column for the side to move and say which rule chose it.

    1) complete a line if possible
    2) otherwise block the other side's immediate line
    3) otherwise play a random column with probability (1 - skill),
       else the leftmost open column
    """
    if session.is_over:
        raise GameAlreadyOver("The game is already over.")
    if not 0.0 <= skill <= 1.0:
        raise ValueError(f"skill must be within [0, 1] (got {skill}).")

    # simulate on a copy so the caller's board is never touched
    board = session.board.copy()
    moves: List[Move] = board.valid_moves()
    if not moves:
        raise ValueError("No valid moves.")

    me = session.current
    win = find_winning_move(board, me, session.win_length)
    if win is not None:
        return win, "win"

    block = find_winning_move(board, other(me), session.win_length)
    if block is not None:
        return block, "block"

    r = rng if rng is not None else random
    if r.random() < 1.0 - skill:
        return r.choice(moves), "random"
    return moves[0], "fallback"


def choose_column(session: GameSession, skill: float, rng: Optional[random.Random] = None) -> Move:
    return plan_move(session, skill, rng)[0]


def select_opponent_move(session: GameSession, skill: float, rng: Optional[random.Random] = None) -> Move:
    if session.is_over:
        raise GameAlreadyOver("The game is already over.")
    if session.current != OPPONENT:
        raise ValueError("It is not the opponent's turn.")
    return choose_column(session, skill, rng)
