from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import get_args

from ..io.league_results import latest_results, read_results
from ..metrics.summarize import (
    MetricKey,
    SummaryConfig,
    branch_mix,
    difficulty_ladder,
    filter_rows,
    ladder_inversions,
    role_summary,
    skill_curve,
    standings,
)
from ..plots import plot_branch_mix, plot_difficulty_ladder, plot_skill_curve, plot_standings

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Summarize a gravity-board skill league export.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing league_results_*.csv")
    ap.add_argument("--pattern", type=str, default="league_results_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")

    ap.add_argument("--top", type=int, default=20, help="Rows in the standings table")
    ap.add_argument("--metric", choices=get_args(MetricKey), default="strength_wilson_lcb", help="Ranking metric")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out agents with fewer than this many games")
    ap.add_argument("--role", action="append", default=None, help="Only these roster roles (repeatable)")

    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    return ap


def _section(title: str, text: str) -> None:
    print(f"\n=== {title} ===")
    print(text)


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    try:
        csv_path = Path(args.csv) if args.csv else latest_results(Path(args.results_dir), pattern=args.pattern)
        df = read_results(csv_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1

    logger.info("Loaded %s (%d agents)", csv_path, len(df))
    print(f"\nLoaded: {csv_path}")

    cfg = SummaryConfig(
        metric=args.metric,
        top_n=args.top,
        min_games=args.min_games,
        roles=tuple(args.role) if args.role else None,
    )
    filtered = filter_rows(df, cfg)
    if filtered.empty:
        logger.error("No agents left after filtering (min games %d, roles %s)", cfg.min_games, cfg.roles)
        return 2

    table = standings(filtered, cfg)
    _section("Standings", table.to_string(index=False))
    _section("By role", role_summary(filtered).to_string(index=False))

    curve = skill_curve(filtered)
    if not curve.empty:
        _section("Skill curve", curve.to_string(index=False))

    ladder = difficulty_ladder(filtered)
    if not ladder.empty:
        _section("Difficulty ladder", ladder.to_string(index=False))
        inverted = ladder_inversions(ladder)
        if inverted:
            logger.warning("Harder difficulties scored lower than the level below: %s", ", ".join(inverted))

    _section("Move reasons", branch_mix(filtered).to_string(index=False, float_format="{:.2f}".format))

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    plot_standings(table, outdir, metric=args.metric, show=args.show)
    plot_skill_curve(filtered, outdir, show=args.show)
    plot_difficulty_ladder(filtered, outdir, show=args.show)
    plot_branch_mix(filtered, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
