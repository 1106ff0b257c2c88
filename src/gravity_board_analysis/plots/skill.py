from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt

from ..metrics.summarize import branch_mix, difficulty_ladder, skill_curve
from .chart import ROLE_COLORS, _finish


def plot_skill_curve(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Points per game against the skill knob, with the baselines as reference lines."""
    curve = skill_curve(df)
    if curve.empty:
        return None

    fig, ax = plt.subplots(figsize=(7, 4.5))
    ax.plot(curve["skill"], curve["ppg"], marker="o", color=ROLE_COLORS["sweep"], label="ppg")
    ax.plot(
        curve["skill"], curve["strength_wilson_lcb"],
        marker="s", linestyle="--", color=ROLE_COLORS["difficulty"], label="strength (LCB)",
    )
    for role in ("baseline", "tactical"):
        ref = df[df["role"] == role]
        if not ref.empty:
            ax.axhline(ref["ppg"].iloc[0], linestyle=":", color=ROLE_COLORS[role], label=ref["name"].iloc[0])
    ax.set_xlim(-0.02, 1.02)
    ax.set_ylim(0, 1)
    ax.set_xlabel("skill")
    ax.set_ylabel("points per game")
    ax.set_title("Results vs skill")
    ax.grid(True, alpha=0.3)
    ax.legend()
    return _finish(fig, outdir, "skill_curve.png", show=show)


def plot_difficulty_ladder(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    ladder = difficulty_ladder(df)
    if ladder.empty:
        return None

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(ladder["difficulty"], ladder["ppg"], color=ROLE_COLORS["difficulty"])
    for x, (ppg, skill) in enumerate(zip(ladder["ppg"], ladder["skill"])):
        ax.annotate(f"skill {skill:.2f}", (x, ppg), ha="center", va="bottom", fontsize=8)
    ax.set_ylim(0, 1)
    ax.set_ylabel("points per game")
    ax.set_title("Difficulty ladder")
    return _finish(fig, outdir, "difficulty_ladder.png", show=show)


def plot_branch_mix(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked share of win / block / random / fallback moves per agent."""
    mix = branch_mix(df)
    if mix.empty:
        return None

    order = df.sort_values("skill", na_position="first")["name"].tolist()
    mix = mix.set_index("name").loc[order].reset_index()

    fig, ax = plt.subplots(figsize=(10, 5))
    bottom = pd.Series(0.0, index=mix.index)
    for reason in ("win", "block", "random", "fallback"):
        ax.bar(mix["name"].astype(str), mix[reason], bottom=bottom, label=reason)
        bottom = bottom + mix[reason]
    ax.set_ylim(0, 1)
    ax.set_ylabel("share of moves")
    ax.set_title("Why each agent chose its moves")
    ax.legend()
    plt.setp(ax.get_xticklabels(), rotation=45, ha="right")
    return _finish(fig, outdir, "branch_mix.png", show=show)
