import logging
import math
from pathlib import Path

import pandas as pd
import pytest

from gravity_board_analysis.__main__ import main as analysis_main
from gravity_board_analysis.io.league_results import latest_results, read_results, roster_role
from gravity_board_analysis.metrics.summarize import (
    SummaryConfig,
    branch_mix,
    difficulty_ladder,
    ladder_inversions,
    role_summary,
    skill_curve,
    standings,
)
from gravity_board_analysis.plots import (
    plot_branch_mix,
    plot_difficulty_ladder,
    plot_skill_curve,
    plot_standings,
)

CSV_TEXT = """name,skill,games,wins,draws,losses,points,ppg,strength_wilson_lcb,avg_ms_per_move,avg_moves_per_game,win_moves,block_moves,random_moves,fallback_moves
Random,,40,8,4,28,10.0,0.25,0.17,0.01,3.1,0,0,124,0
WinBlock,1.0,40,30,6,4,33.0,0.825,0.74,0.02,3.4,20,30,0,86
Mixed easy,0.3,40,18,6,16,21.0,0.525,0.42,0.02,3.3,18,25,60,29
Mixed medium,0.6,40,17,6,17,20.0,0.5,0.40,0.02,3.5,20,28,40,40
Mixed skill0.30,0.3,40,20,4,16,22.0,0.55,0.44,0.02,3.2,19,22,62,25
Mixed skill0.00,0.0,20,5,2,13,6.0,0.3,0.15,0.02,3.0,4,8,50,0
"""


@pytest.fixture
def results_csv(tmp_path: Path) -> Path:
    path = tmp_path / "league_results_20260101_120000.csv"
    path.write_text(CSV_TEXT)
    return path


@pytest.fixture
def results(results_csv) -> pd.DataFrame:
    return read_results(results_csv)


def test_roster_roles():
    assert roster_role("Random") == "baseline"
    assert roster_role("WinBlock") == "tactical"
    assert roster_role("Mixed hard") == "difficulty"
    assert roster_role("Mixed skill0.25") == "sweep"
    assert roster_role("Mixed nightmare") == "other"


def test_read_results_derives_columns(results):
    assert len(results) == 6
    assert pd.api.types.is_numeric_dtype(results["skill"])
    by_name = results.set_index("name")
    assert math.isnan(by_name.loc["Random", "skill"])
    assert by_name.loc["Mixed medium", "role"] == "difficulty"
    assert by_name.loc["WinBlock", "moves"] == 136
    assert by_name.loc["WinBlock", "tactical_share"] == pytest.approx(50 / 136)
    assert by_name.loc["Random", "tactical_share"] == 0.0


def test_agent_without_moves_has_no_tactical_share(tmp_path):
    path = tmp_path / "league_results_20260101_000000.csv"
    path.write_text(CSV_TEXT.splitlines()[0] + "\nRandom,,0,0,0,0,0,0,0,0,0,0,0,0,0\n")
    df = read_results(path)
    assert df.loc[0, "moves"] == 0
    assert math.isnan(df.loc[0, "tactical_share"])


def test_read_results_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_results(tmp_path / "missing.csv")
    bad = tmp_path / "bad.csv"
    bad.write_text("name,games\nfoo,1\n")
    with pytest.raises(ValueError, match="missing"):
        read_results(bad)


def test_latest_results_uses_timestamp(tmp_path, results_csv):
    newer = tmp_path / "league_results_20260202_120000.csv"
    newer.write_text(CSV_TEXT)
    (tmp_path / "league_results_zz_manual.csv").write_text(CSV_TEXT)
    assert latest_results(tmp_path) == newer
    with pytest.raises(FileNotFoundError):
        latest_results(tmp_path / "nowhere")
    with pytest.raises(FileNotFoundError):
        latest_results(tmp_path, pattern="*.json")


def test_standings_ranks_and_filters(results):
    table = standings(results, SummaryConfig(top_n=3, min_games=30))
    assert table["name"].tolist() == ["WinBlock", "Mixed skill0.30", "Mixed easy"]
    assert table["rk"].tolist() == [1, 2, 3]
    assert table.loc[0, "W-D-L"] == "30-6-4"

    only_levels = standings(results, SummaryConfig(roles=("difficulty",)))
    assert only_levels["name"].tolist() == ["Mixed easy", "Mixed medium"]


def test_standings_lower_is_better_metric(results):
    table = standings(results, SummaryConfig(metric="avg_moves_per_game", top_n=2))
    assert table["name"].tolist() == ["Mixed skill0.00", "Random"]
    assert "avg_moves_per_game" in table.columns
    with pytest.raises(ValueError):
        standings(results, SummaryConfig(metric="nope"))  # type: ignore[arg-type]


def test_role_summary(results):
    summary = role_summary(results).set_index("role")
    assert summary.index[0] == "tactical"
    assert summary.loc["sweep", "agents"] == 2
    assert summary.loc["sweep", "best"] == "Mixed skill0.30"
    assert summary.loc["difficulty", "best"] == "Mixed easy"
    assert summary.loc["difficulty", "games"] == 80


def test_skill_curve_leaves_baselines_out(results):
    curve = skill_curve(results)
    assert curve["skill"].tolist() == [0.0, 0.3, 0.6]
    row = curve[curve["skill"] == 0.3].iloc[0]
    assert row["agents"] == 2
    assert row["ppg"] == pytest.approx((0.525 + 0.55) / 2)


def test_difficulty_ladder_flags_inversions(results):
    ladder = difficulty_ladder(results)
    assert ladder["difficulty"].tolist() == ["easy", "medium"]
    assert math.isnan(ladder.loc[0, "ppg_step"])
    assert ladder.loc[1, "ppg_step"] == pytest.approx(-0.025)
    assert ladder_inversions(ladder) == ["medium"]


def test_branch_mix_shares_sum_to_one(results):
    mix = branch_mix(results).set_index("name")
    assert list(mix.columns) == ["win", "block", "random", "fallback"]
    assert mix.sum(axis=1).tolist() == pytest.approx([1.0] * 6)
    assert mix.loc["Random", "random"] == 1.0
    assert mix.loc["WinBlock", "random"] == 0.0


def test_figures_are_written(results, tmp_path):
    out = tmp_path / "figs"
    assert plot_skill_curve(results, out, show=False) == out / "skill_curve.png"
    assert plot_branch_mix(results, out, show=False) == out / "branch_mix.png"
    assert plot_difficulty_ladder(results, out, show=False) == out / "difficulty_ladder.png"
    table = standings(results, SummaryConfig())
    assert plot_standings(table, out, metric="ppg", show=False) == out / "standings_ppg.png"
    assert (out / "skill_curve.png").stat().st_size > 0


def test_cli_analyze_and_figures(results_csv, tmp_path, capsys, caplog):
    with caplog.at_level(logging.WARNING):
        assert analysis_main(["analyze", "--csv", str(results_csv), "--no-plots"]) == 0
    out = capsys.readouterr().out
    assert "Standings" in out
    assert "Skill curve" in out
    assert "Difficulty ladder" in out
    assert "medium" in caplog.text

    figs = tmp_path / "out"
    assert analysis_main(["figures", "--csv", str(results_csv), "--figures-dir", str(figs)]) == 0
    assert (figs / "branch_mix.png").exists()
    assert (figs / "standings_strength_wilson_lcb.png").exists()


def test_cli_reports_bad_input(results_csv, tmp_path):
    assert analysis_main(["analyze", "--results-dir", str(tmp_path / "none")]) == 1
    assert analysis_main(["analyze", "--csv", str(results_csv), "--role", "nobody", "--no-plots"]) == 2
    assert analysis_main(["bogus"]) == 2
    with pytest.raises(SystemExit):
        analysis_main(["analyze", "--csv", str(results_csv), "--metric", "nope"])
