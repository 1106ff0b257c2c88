from .chart import plot_standings
from .skill import (
    plot_branch_mix,
    plot_difficulty_ladder,
    plot_skill_curve,
)

__all__ = [
    "plot_branch_mix",
    "plot_difficulty_ladder",
    "plot_skill_curve",
    "plot_standings",
]
