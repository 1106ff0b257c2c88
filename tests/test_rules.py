from board_helpers import board_from

from gravity_board.core.rules import (
    check_winner,
    check_winner_with_line,
    find_winning_line,
    is_draw,
    is_winning_drop,
    winning_lines,
)


def test_horizontal_line_read_left_to_right():
    b = board_from("""
        .......
        .......
        .......
        .......
        .......
        .XXXXO.
    """)
    assert find_winning_line(b, 5, 2, 4) == [(5, 1), (5, 2), (5, 3), (5, 4)]


def test_vertical_line_read_bottom_to_top():
    b = board_from("""
        ...
        .X.
        .X.
    """)
    b.grid[0][1] = "X"
    assert find_winning_line(b, 0, 1, 3) == [(2, 1), (1, 1), (0, 1)]


def test_diagonal_down_right():
    b = board_from("""
        X..
        OX.
        OOX
    """)
    assert find_winning_line(b, 1, 1, 3) == [(0, 0), (1, 1), (2, 2)]


def test_diagonal_down_left():
    b = board_from("""
        ..O
        .OX
        OXX
    """)
    assert find_winning_line(b, 2, 0, 3) == [(0, 2), (1, 1), (2, 0)]


def test_no_line_through_anchor():
    b = board_from("""
        ...
        X..
        XOO
    """)
    assert find_winning_line(b, 1, 0, 3) is None
    assert find_winning_line(b, 0, 0, 3) is None  # empty anchor


def test_long_run_reports_window_containing_anchor():
    b = board_from("""
        .......
        XXXXX..
    """)
    # anchor at the right end of a run of five
    assert find_winning_line(b, 1, 4, 4) == [(1, 1), (1, 2), (1, 3), (1, 4)]
    # anchor in the middle: earliest window that contains it
    assert find_winning_line(b, 1, 2, 4) == [(1, 0), (1, 1), (1, 2), (1, 3)]


def test_horizontal_reported_before_vertical_when_both_complete():
    b = board_from("""
        ...
        ..X
        XXX
    """)
    b.grid[0][2] = "X"
    # (2,2) completes both the bottom row and the right column
    assert find_winning_line(b, 2, 2, 3) == [(2, 0), (2, 1), (2, 2)]


def test_is_winning_drop_restores_board():
    b = board_from("""
        ...
        X..
        XO.
    """)
    before = [row[:] for row in b.grid]
    assert is_winning_drop(b, 0, "X", 3)
    assert not is_winning_drop(b, 1, "X", 3)
    assert b.grid == before


def test_whole_board_scan():
    b = board_from("""
        ....
        .O..
        .OX.
        XOXX
    """)
    b.grid[0][1] = "O"
    winner, line = check_winner_with_line(b, 4)
    assert winner == "O"
    assert line == [(3, 1), (2, 1), (1, 1), (0, 1)]
    assert check_winner(b, 4) == "O"
    assert check_winner(b, 5) is None


def test_winning_lines_reports_every_side():
    b = board_from("""
        XO.
        XO.
        XO.
    """)
    assert list(winning_lines(b, 3)) == [
        ("X", [(2, 0), (1, 0), (0, 0)]),
        ("O", [(2, 1), (1, 1), (0, 1)]),
    ]
    assert list(winning_lines(b, 4)) == []


def test_is_draw_requires_full_board_without_line():
    full = board_from("""
        XOX
        XOO
        OXX
    """)
    assert is_draw(full, 3)
    not_full = board_from("""
        XO.
        XOO
        OXX
    """)
    assert not is_draw(not_full, 3)
