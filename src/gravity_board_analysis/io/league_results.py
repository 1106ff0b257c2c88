from __future__ import annotations

import re
from pathlib import Path

import pandas as pd

from gravity_board.config import DIFFICULTIES
from gravity_board.scripts.league_core import CSV_COLUMNS

REASON_COLS = ["win_moves", "block_moves", "random_moves", "fallback_moves"]
NUMERIC_COLS = [c for c in CSV_COLUMNS if c != "name"]

_STAMP = re.compile(r"(\d{8}_\d{6})")


def roster_role(name: str) -> str:
    """Which part of the league roster an agent name comes from."""
    if name == "Random":
        return "baseline"
    if name == "WinBlock":
        return "tactical"
    if name.startswith("Mixed skill"):
        return "sweep"
    if name.startswith("Mixed ") and name[len("Mixed "):] in DIFFICULTIES:
        return "difficulty"
    return "other"


def read_results(csv_path: Path) -> pd.DataFrame:
    """
    Load a league_results_*.csv written by the skill league.

    Every exported column must be present. Three columns are derived:
    ``role`` (baseline / tactical / difficulty / sweep), ``moves`` (sum of
    the move-reason counters) and ``tactical_share`` (win + block moves
    over all moves, NaN for an agent that never moved).
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path, skipinitialspace=True)
    df.columns = [c.strip() for c in df.columns]
    missing = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{csv_path.name} is not a league results file (missing {missing})")

    df = df.dropna(subset=["name"])
    df["name"] = df["name"].astype(str).str.strip()
    df = df[df["name"] != ""].reset_index(drop=True)
    # blank skill (Random) stays NaN
    df[NUMERIC_COLS] = df[NUMERIC_COLS].apply(pd.to_numeric, errors="coerce")

    df["role"] = df["name"].map(roster_role)
    df["moves"] = df[REASON_COLS].fillna(0).sum(axis=1)
    decided = df["win_moves"].fillna(0) + df["block_moves"].fillna(0)
    df["tactical_share"] = decided / df["moves"].where(df["moves"] > 0)
    return df


def latest_results(results_dir: Path, pattern: str = "league_results_*.csv") -> Path:
    """Newest export by the timestamp in its name; unstamped files rank oldest."""
    if not results_dir.is_dir():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = list(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    def stamp(path: Path) -> tuple[str, str]:
        m = _STAMP.search(path.stem)
        return (m.group(1) if m else "", path.name)

    return max(files, key=stamp)
