from __future__ import annotations

import random
from typing import Tuple

from gravity_board.ai.skill_agent import SkillAgent
from gravity_board.config import DIFFICULTIES, Difficulty, get_difficulty


def agent_for_difficulty(difficulty: str, seed: int | None = None) -> SkillAgent:
    d = get_difficulty(difficulty)
    return SkillAgent(name=f"AI ({d.name})", skill=d.skill, seed=seed)


def random_ai_agent(rng: random.Random | None = None) -> Tuple[SkillAgent, Difficulty]:
    """
    Pick one difficulty level at random and build its opponent.
    The difficulty comes back too: it also sets the clock and the score scale.
    """
    r = rng or random
    d = DIFFICULTIES[r.choice(sorted(DIFFICULTIES))]
    agent = agent_for_difficulty(d.name)
    agent.name = f"{agent.name} (skill {agent.skill:.2f})"
    return agent, d
