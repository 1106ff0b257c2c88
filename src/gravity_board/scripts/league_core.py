from __future__ import annotations

import csv
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List

from gravity_board.config import ROWS, COLS, CONNECT_N, LEAGUE_GAMES_PER_PAIR, LEAGUE_SEED, LEAGUE_Z

from .league_format import A, Col, hr, print_table, term_width
from .league_play import add_result, add_side_stats, chunked, run_pairings_batch
from .league_scoring import avg_moves_per_game, avg_ms_per_move, ppg, strength_score
from .league_types import Agg, Team

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name", "skill",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move", "avg_moves_per_game",
    "win_moves", "block_moves", "random_moves", "fallback_moves",
]


def _fmt_wdl(a: Agg) -> str:
    return f"{a.wins}-{a.draws}-{a.losses}"


def print_standings(title: str, teams: List[Team], agg: Dict[str, Agg], z: float, top_n: int = 30) -> None:
    w = term_width(120)
    ranked = sorted(teams, key=lambda t: strength_score(agg[t.name], z), reverse=True)

    # rk(3) strength(10) ppg(5) g(4) W-D-L(9) skill(5) + separators
    fixed = 3 + 2 + 10 + 2 + 5 + 2 + 4 + 2 + 9 + 2 + 5 + 2
    agent_w = max(18, min(40, w - fixed))
    cols = [
        Col("rk", 3, "right"),
        Col("agent", agent_w),
        Col("strength", 10, "right"),
        Col("ppg", 5, "right"),
        Col("g", 4, "right"),
        Col("W-D-L", 9, "right"),
        Col("skill", 5, "right"),
    ]

    rows = []
    for i, t in enumerate(ranked[:top_n], start=1):
        a = agg[t.name]
        rows.append([
            str(i),
            t.name,
            f"{strength_score(a, z):0.6f}",
            f"{ppg(a):0.3f}",
            str(a.games),
            _fmt_wdl(a),
            "-" if t.skill is None else f"{t.skill:0.2f}",
        ])

    print("\n" + A.bold(f"=== {title} ==="))
    print(A.dim(hr("═", w)))
    print_table("Standings by Strength (Wilson LCB of PPG)", cols, rows, width=w)


def write_csv(out_path: Path, teams: List[Team], agg: Dict[str, Agg], z: float) -> Path:
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for t in teams:
            a = agg[t.name]
            w.writerow([
                t.name, "" if t.skill is None else t.skill,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                round(avg_ms_per_move(a), 3), round(avg_moves_per_game(a), 3),
                a.reasons["win"], a.reasons["block"], a.reasons["random"], a.reasons["fallback"],
            ])
    return out_path


def run_league(
    teams: List[Team],
    games_per_pair: int = LEAGUE_GAMES_PER_PAIR,
    seed: int = LEAGUE_SEED,
    max_workers: int | None = None,
    batch_pairings: int = 12,
    z: float = LEAGUE_Z,
    rows: int = ROWS,
    cols: int = COLS,
    win_length: int = CONNECT_N,
    export_dir: Path | None = None,
    quiet: bool = False,
) -> Dict[str, Agg]:
    """
    Full round robin: every pair of teams plays ``games_per_pair`` games with
    alternating colours. Returns the per-team aggregates; writes a CSV when
    ``export_dir`` is given.
    """
    if len(teams) < 2:
        raise ValueError("A league needs at least two teams.")
    names = [t.name for t in teams]
    if len(set(names)) != len(names):
        raise ValueError("Team names must be unique.")

    agg: Dict[str, Agg] = {t.name: Agg() for t in teams}

    def apply_game_result(A_name: str, B_name: str, a_is_x: bool, outcome: str, stats) -> None:
        add_result(agg[A_name], agg[B_name], outcome, a_is_x=a_is_x)
        x_name, o_name = (A_name, B_name) if a_is_x else (B_name, A_name)
        add_side_stats(agg[x_name], stats["X"])
        add_side_stats(agg[o_name], stats["O"])

    pair_items = []
    n = len(teams)
    for i in range(n):
        for j in range(i + 1, n):
            base_seed = seed + i * 10_000 + j * 100
            pair_items.append((teams[i].name, teams[j].name, teams[i].make, teams[j].make, base_seed))

    if max_workers is None:
        max_workers = min(os.cpu_count() or 2, 6)

    logger.info(
        "League: %d teams, %d pairings, %d games/pair, %dx%d connect %d, workers=%d",
        n, len(pair_items), games_per_pair, rows, cols, win_length, max_workers,
    )
    start = time.perf_counter()

    batches = [(chunk, games_per_pair, rows, cols, win_length) for chunk in chunked(pair_items, batch_pairings)]
    if max_workers <= 1:
        for batch in batches:
            for result in run_pairings_batch(batch):
                apply_game_result(*result)
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            futures = [ex.submit(run_pairings_batch, batch) for batch in batches]
            for fut in as_completed(futures):
                for result in fut.result():
                    apply_game_result(*result)

    logger.info("League finished in %.2fs", time.perf_counter() - start)

    if not quiet:
        print_standings("Final standings", teams, agg, z)

    if export_dir is not None:
        export_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y%m%d_%H%M%S")
        out_path = write_csv(export_dir / f"league_results_{ts}.csv", teams, agg, z)
        logger.info("Wrote CSV: %s", out_path)
        if not quiet:
            print("\n" + A.bold("Export"))
            print(A.dim(hr("═", term_width(120))))
            print(f"Wrote CSV: {out_path}")

    return agg
