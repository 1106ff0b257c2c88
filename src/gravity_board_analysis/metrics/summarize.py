from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

import pandas as pd

from gravity_board.config import DIFFICULTIES

from ..io.league_results import REASON_COLS

MetricKey = Literal[
    "strength_wilson_lcb",
    "ppg",
    "tactical_share",
    "avg_moves_per_game",
    "avg_ms_per_move",
]

# lower is better
_ASCENDING = {"avg_moves_per_game", "avg_ms_per_move"}

SKILL_ROLES = ("difficulty", "sweep")


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0
    roles: Optional[tuple[str, ...]] = None


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df
    if cfg.min_games > 0:
        out = out[out["games"].fillna(0) >= cfg.min_games]
    if cfg.roles is not None:
        out = out[out["role"].isin(cfg.roles)]
    return out.copy()


def standings(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """League table ranked by ``cfg.metric`` with a compact W-D-L column."""
    _require_cols(df, ["name", cfg.metric])
    out = filter_rows(df, cfg).sort_values(
        [cfg.metric, "name"], ascending=[cfg.metric in _ASCENDING, True]
    )

    out["W-D-L"] = [f"{w:.0f}-{d:.0f}-{l:.0f}" for w, d, l in zip(out["wins"], out["draws"], out["losses"])]
    keep = ["name", "role", "skill", "games", "W-D-L", "ppg", "strength_wilson_lcb", "tactical_share"]
    if cfg.metric not in keep:
        keep.append(cfg.metric)
    out =out[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def role_summary(df: pd.DataFrame) -> pd.DataFrame:
    """One row per roster role: size, games, mean ppg and its strongest agent."""
    if df.empty:
        return pd.DataFrame(columns=["role", "agents", "games", "ppg", "best"])

    best = df.sort_values("strength_wilson_lcb", ascending=False).drop_duplicates("role")[["role", "name"]]
    out = (
        df.groupby("role", as_index=False)
        .agg(agents=("name", "count"), games=("games", "sum"), ppg=("ppg", "mean"))
        .merge(best.rename(columns={"name": "best"}), on="role")
    )
    return out.sort_values("ppg", ascending=False).reset_index(drop=True)


def skill_curve(df: pd.DataFrame) -> pd.DataFrame:
    """
    Mean results per skill level for the skill-mixed agents, ordered by skill.
    Random and WinBlock are baselines and stay off the curve.
    """
    d = df[df["role"].isin(SKILL_ROLES)].dropna(subset=["skill"])
    if d.empty:
        return pd.DataFrame(columns=["skill", "agents", "ppg", "strength_wilson_lcb", "tactical_share"])

    out = d.groupby("skill", as_index=False).agg(
        agents=("name", "count"),
        ppg=("ppg", "mean"),
        strength_wilson_lcb=("strength_wilson_lcb", "mean"),
        tactical_share=("tactical_share", "mean"),
    )
    return out.sort_values("skill").reset_index(drop=True)


def difficulty_ladder(df: pd.DataFrame) -> pd.DataFrame:
    """
    The named difficulties in table order, with the ppg gained over the
    level below. A negative ``ppg_step`` means a harder setting scored worse.
    """
    d = df[df["role"] == "difficulty"].copy()
    order = {f"Mixed {name}": i for i, name in enumerate(DIFFICULTIES)}
    d["level"] = d["name"].map(order)
    d = d.sort_values("level").reset_index(drop=True)
    d.insert(1, "difficulty", d["name"].str.replace("Mixed ", "", regex=False))
    d["ppg_step"] = d["ppg"].diff()
    return d[["difficulty", "skill", "games", "ppg", "ppg_step", "strength_wilson_lcb"]]


def ladder_inversions(ladder: pd.DataFrame) -> list[str]:
    """Difficulties that scored below the level beneath them."""
    return ladder.loc[ladder["ppg_step"] < 0, "difficulty"].tolist()


def branch_mix(df: pd.DataFrame) -> pd.DataFrame:
    """
    Share of each move reason (win / block / random / fallback) per agent.
    Agents that never moved get zeros rather than NaN.
    """
    _require_cols(df, ["name", *REASON_COLS])
    counts = df.set_index("name")[REASON_COLS].fillna(0)
    totals = counts.sum(axis=1)
    shares = counts.div(totals.where(totals > 0, 1), axis=0)
    shares.columns = [c.replace("_moves", "") for c in REASON_COLS]
    return shares.reset_index()
