import pytest

from gravity_board.config import get_difficulty
from gravity_board.game.engine import apply_move, new_game
from gravity_board.game.results import banner, outcome_of
from gravity_board.game.scoring import round_result, score_round


def test_win_score_adds_time_and_move_bonus():
    easy = get_difficulty("easy")
    # half the clock left, 5 of 9 cells used
    expected = round(1000 * (1 + 0.5 * 0.2 + (4 / 9) * 0.3))
    assert score_round("win", easy, moves=5, elapsed_sec=15.0, cells=9) == expected


def test_win_score_bonuses_never_negative():
    hard = get_difficulty("hard")
    assert score_round("win", hard, moves=9, elapsed_sec=999.0, cells=9) == 3000


def test_loss_and_draw_scores():
    extreme = get_difficulty("extreme")
    assert score_round("loss", extreme, moves=7, elapsed_sec=3.0, cells=9) == 500
    assert score_round("draw", extreme, moves=9, elapsed_sec=3.0, cells=9) == 2500


def test_outcome_of_each_side():
    s = new_game(3, 3, 3)
    with pytest.raises(ValueError):
        outcome_of(s)
    for col in (0, 1, 0, 1, 0):
        apply_move(s, col)
    assert outcome_of(s) == "win"
    assert outcome_of(s, side="O") == "loss"
    assert banner(s) == "Player X wins!"


def test_round_result_bundles_the_round():
    s = new_game(3, 3, 3)
    for col in (0, 1, 0, 1, 0):
        apply_move(s, col)
    medium = get_difficulty("medium")
    result = round_result(s, medium, elapsed_sec=5.0)
    assert result.outcome == "win"
    assert result.moves == 5
    assert result.difficulty == "medium"
    assert result.winning_line == [(2, 0), (1, 0), (0, 0)]
    assert result.score == score_round("win", medium, 5, 5.0, 9)


def test_timeout_scores_nothing():
    easy = get_difficulty("easy")
    assert score_round("loss", easy, moves=4, elapsed_sec=30.0, cells=9, timed_out=True) == 0

    s = new_game(3, 3, 3)
    apply_move(s, 0)
    s.status, s.winner = "won", "O"
    result = round_result(s, easy, elapsed_sec=30.0, timed_out=True)
    assert result.outcome == "loss"
    assert result.timed_out
    assert result.score == 0
