from __future__ import annotations

import inspect
from functools import partial
from typing import List

from gravity_board.ai.random_agent import RandomAgent
from gravity_board.ai.skill_agent import SkillAgent
from gravity_board.ai.tactical_agent import TacticalAgent
from gravity_board.config import DIFFICULTIES

from .league_types import Team


def _make_agent(cls, kwargs: dict) -> object:
    sig = inspect.signature(cls)
    allowed = set(sig.parameters.keys())
    filtered = {k: v for k, v in kwargs.items() if k in allowed}
    return cls(**filtered)


def _team(cls, *, name: str, skill: float | None = None, **kwargs) -> Team:
    if skill is not None:
        kwargs["skill"] = skill
    return Team(name, partial(_make_agent, cls, {"name": name, **kwargs}), skill=skill)


def build_roster(sweep_steps: int = 5) -> List[Team]:
    """
    Baselines, one opponent per difficulty, and an even skill sweep 0..1.
    """
    teams: List[Team] = []

    teams.append(_team(RandomAgent, name="Random"))
    teams.append(_team(TacticalAgent, name="WinBlock", skill=1.0))

    for d in DIFFICULTIES.values():
        teams.append(_team(SkillAgent, name=f"Mixed {d.name}", skill=d.skill))

    if sweep_steps > 1:
        for i in range(sweep_steps):
            s = round(i / (sweep_steps - 1), 3)
            teams.append(_team(SkillAgent, name=f"Mixed skill{s:.2f}", skill=s))

    return teams
