import csv

import pytest

from gravity_board.ai.random_agent import RandomAgent
from gravity_board.ai.tactical_agent import TacticalAgent
from gravity_board.scripts.league_core import CSV_COLUMNS, run_league
from gravity_board.scripts.league_main import main as league_main
from gravity_board.scripts.league_play import add_result, play_headless
from gravity_board.scripts.league_roster import build_roster
from gravity_board.scripts.league_scoring import ppg, strength_score, wilson_lcb
from gravity_board.scripts.league_types import Agg


def test_play_headless_reports_outcome_and_side_stats():
    outcome, stats = play_headless(TacticalAgent(), RandomAgent(), seed_base=3, rows=6, cols=7, win_length=4)
    assert outcome in {"X", "O", "D"}
    for side in ("X", "O"):
        assert stats[side]["moves"] == sum(stats[side]["reasons"].values())
    assert stats["O"]["reasons"]["random"] == stats["O"]["moves"]
    assert stats["X"]["reasons"]["random"] == 0


def test_play_headless_is_reproducible():
    a = play_headless(RandomAgent(), RandomAgent(), seed_base=9, rows=3, cols=3, win_length=3)
    b = play_headless(RandomAgent(), RandomAgent(), seed_base=9, rows=3, cols=3, win_length=3)
    assert a[0] == b[0]
    assert a[1]["X"]["moves"] == b[1]["X"]["moves"]


def test_add_result_points():
    a, b = Agg(), Agg()
    add_result(a, b, "X", a_is_x=True)
    add_result(a, b, "D", a_is_x=False)
    add_result(a, b, "X", a_is_x=False)
    assert (a.wins, a.draws, a.losses) == (1, 1, 1)
    assert (b.wins, b.draws, b.losses) == (1, 1, 1)
    assert a.points == b.points == 1.5
    assert ppg(a) == 0.5


def test_wilson_lcb_bounds():
    assert wilson_lcb(0.5, 0, 1.28) == 0.0
    assert 0.0 < wilson_lcb(0.9, 50, 1.28) < 0.9
    assert wilson_lcb(0.9, 500, 1.28) > wilson_lcb(0.9, 50, 1.28)
    a = Agg(games=10, points=10.0, wins=10)
    assert 0.0 < strength_score(a, 1.28) < 1.0


def test_roster_names_unique_and_skills_in_range():
    teams = build_roster(sweep_steps=3)
    names = [t.name for t in teams]
    assert len(names) == len(set(names))
    assert {t.skill for t in teams if t.skill is not None} >= {0.0, 0.3, 0.5, 0.6, 0.8, 0.95, 1.0}
    for t in teams:
        agent = t.make()
        assert agent.name == t.name


def test_round_robin_in_process_writes_csv(tmp_path):
    teams = [t for t in build_roster(sweep_steps=0) if t.name in {"Random", "WinBlock", "Mixed easy"}]
    agg = run_league(
        teams, games_per_pair=4, seed=1, max_workers=1,
        rows=3, cols=3, win_length=3, export_dir=tmp_path, quiet=True,
    )
    # 3 pairings * 4 games, each team plays 2 pairings
    assert all(a.games == 8 for a in agg.values())
    total_points = sum(a.points for a in agg.values())
    assert total_points == pytest.approx(12.0)

    files = list(tmp_path.glob("league_results_*.csv"))
    assert len(files) == 1
    with open(files[0], newline="") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == CSV_COLUMNS
    by_name = {r["name"]: r for r in rows}
    assert by_name["Random"]["skill"] == ""
    assert float(by_name["WinBlock"]["skill"]) == 1.0
    assert int(by_name["WinBlock"]["random_moves"]) == 0


def test_league_rejects_bad_rosters():
    teams = build_roster(sweep_steps=0)
    with pytest.raises(ValueError):
        run_league(teams[:1], max_workers=1, quiet=True)
    with pytest.raises(ValueError):
        run_league([teams[0], teams[0]], max_workers=1, quiet=True)


def test_league_cli_without_export(capsys):
    assert league_main(["--board", "classic", "--games-per-pair", "2", "--sweep-steps", "0",
                        "--workers", "1", "--no-export"]) == 0
    assert "Final standings" in capsys.readouterr().out
