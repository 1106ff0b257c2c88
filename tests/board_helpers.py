from gravity_board.core.board import Board
from gravity_board.core.rules import check_winner_with_line


def parse_grid(text):
    """Rows top to bottom; '.' empty, 'X'/'O' marks."""
    rows = [line.strip() for line in text.strip().splitlines()]
    return [[None if ch == "." else ch for ch in row] for row in rows]


def board_from(text):
    grid = parse_grid(text)
    return Board(len(grid), len(grid[0]), grid)


def has_gap_under_mark(board):
    for c in range(board.cols):
        seen = False
        for r in range(board.rows):
            if board.grid[r][c] is not None:
                seen = True
            elif seen:
                return True
    return False


def any_line(board, win_length):
    return check_winner_with_line(board, win_length)
