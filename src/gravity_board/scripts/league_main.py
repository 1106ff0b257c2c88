from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from gravity_board.config import BOARD_PRESETS, DEFAULT_PRESET, LEAGUE_GAMES_PER_PAIR, LEAGUE_SEED, LEAGUE_Z, LOG_LEVEL

from .league_core import run_league
from .league_format import A
from .league_roster import build_roster


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="gravity-board-league",
        description="Play the opponent strategies against each other and export a results CSV.",
    )
    ap.add_argument("--board", choices=sorted(BOARD_PRESETS), default=DEFAULT_PRESET, help="Board preset")
    ap.add_argument("--games-per-pair", type=int, default=LEAGUE_GAMES_PER_PAIR, help="Games per pairing (colours alternate)")
    ap.add_argument("--sweep-steps", type=int, default=5, help="Number of evenly spaced skill levels in the sweep")
    ap.add_argument("--seed", type=int, default=LEAGUE_SEED, help="Base seed")
    ap.add_argument("--workers", type=int, default=None, help="Worker processes (default = cpu cores, capped at 6)")
    ap.add_argument("--batch-pairings", type=int, default=12, help="Pairings per worker task")
    ap.add_argument("--z", type=float, default=LEAGUE_Z, help="Z for Wilson LCB")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where league_results_*.csv is written")
    ap.add_argument("--no-export", action="store_true", help="Do not write a CSV")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.WARNING))

    rows, cols, win_length = BOARD_PRESETS[args.board]
    roster = build_roster(sweep_steps=args.sweep_steps)
    print(A.bold(f"Roster size: {len(roster)} teams on {args.board} ({rows}x{cols}, connect {win_length})"))

    start = time.perf_counter()
    run_league(
        roster,
        games_per_pair=args.games_per_pair,
        seed=args.seed,
        max_workers=args.workers,
        batch_pairings=args.batch_pairings,
        z=args.z,
        rows=rows,
        cols=cols,
        win_length=win_length,
        export_dir=None if args.no_export else Path(args.results_dir),
    )
    elapsed = time.perf_counter() - start

    h = int(elapsed // 3600)
    m = int((elapsed % 3600) // 60)
    s = elapsed % 60
    print(A.bold(f"Total runtime: {h}:{m:02d}:{s:06.3f}"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
