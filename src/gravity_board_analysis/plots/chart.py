from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

ROLE_COLORS = {
    "baseline": "tab:gray",
    "tactical": "tab:red",
    "difficulty": "tab:blue",
    "sweep": "tab:green",
    "other": "tab:purple",
}


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_standings(table: pd.DataFrame, outdir: Path, metric: str, *, show: bool) -> Path | None:
    """Bars in ranking order, coloured by roster role. ``table`` comes from ``standings``."""
    if table.empty or metric not in table.columns:
        return None

    colors = [ROLE_COLORS.get(r, ROLE_COLORS["other"]) for r in table["role"]]
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(table["name"].astype(str), table[metric].astype(float), color=colors)
    present = set(table["role"])
    handles = [Patch(color=color, label=role) for role, color in ROLE_COLORS.items() if role in present]
    ax.set_title(f"League standings: {metric}")
    ax.set_xlabel("agent")
    ax.set_ylabel(metric)
    ax.legend(handles=handles)
    plt.setp(ax.get_xticklabels(), rotation=45, ha="right")
    return _finish(fig, outdir, f"standings_{metric}.png", show=show)
