from __future__ import annotations

import argparse
import logging
from pathlib import Path

from ..io.league_results import latest_results, read_results
from ..metrics.summarize import SummaryConfig, filter_rows, standings
from ..plots import plot_branch_mix, plot_difficulty_ladder, plot_skill_curve, plot_standings

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="gravity_board_analysis figures",
        description="Write the standings, skill-curve, difficulty and move-reason figures for a league export",
    )
    ap.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Path to a specific results CSV. If omitted, uses latest CSV in --results-dir matching --pattern.",
    )
    ap.add_argument("--results-dir", type=str, default="data/results")
    ap.add_argument("--pattern", type=str, default="league_results_*.csv")
    ap.add_argument("--figures-dir", type=str, default="data/figures", help="Output directory.")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out agents with fewer than this many games.")
    ap.add_argument("--top", type=int, default=20, help="Agents in the standings chart.")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    try:
        csv_path = Path(args.csv) if args.csv else latest_results(Path(args.results_dir), pattern=args.pattern)
        df = read_results(csv_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1

    cfg = SummaryConfig(min_games=args.min_games, top_n=args.top)
    df = filter_rows(df, cfg)
    figures_dir = Path(args.figures_dir)

    created: dict[str, Path] = {}
    for key, path in (
        ("standings", plot_standings(standings(df, cfg), figures_dir, metric=cfg.metric, show=False)),
        ("skill_curve", plot_skill_curve(df, figures_dir, show=False)),
        ("difficulty_ladder", plot_difficulty_ladder(df, figures_dir, show=False)),
        ("branch_mix", plot_branch_mix(df, figures_dir, show=False)),
    ):
        if path is not None:
            created[key] = path

    print(f"Loaded: {csv_path}")
    print(f"Wrote {len(created)} outputs under: {figures_dir.resolve()}")
    for k, p in created.items():
        print(f"- {k}: {p}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
