from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from gravity_board.config import Difficulty
from gravity_board.game.results import outcome_of
from gravity_board.game.state import GameSession
from gravity_board.types import Coord, Outcome

MOVE_BONUS_WEIGHT = 0.3
LOSS_FRACTION = 0.1
DRAW_FRACTION = 0.5


@dataclass(frozen=True)
class RoundResult:
    """What a finished round reports to a score-submission service."""
    outcome: Outcome
    difficulty: str
    moves: int
    elapsed_sec: float
    score: int
    winning_line: Optional[List[Coord]] = None
    timed_out: bool = False


def score_round(
    outcome: Outcome, difficulty: Difficulty, moves: int, elapsed_sec: float, cells: int, timed_out: bool = False
) -> int:
    """
    Win:  max_score * (1 + time bonus + move bonus)
          time bonus = share of the time limit left * difficulty.time_bonus
          move bonus = share of the board left empty * 0.3
    Loss: 10% of max_score. Draw: 50% of max_score.
    Running out of time scores nothing.
    """
    if timed_out:
        return 0
    if outcome == "loss":
        return round(difficulty.max_score * LOSS_FRACTION)
    if outcome == "draw":
        return round(difficulty.max_score * DRAW_FRACTION)

    limit = float(difficulty.time_limit_sec)
    time_part = max(0.0, (limit - elapsed_sec) / limit) * difficulty.time_bonus if limit > 0 else 0.0
    move_part = max(0.0, (cells - moves) / cells) * MOVE_BONUS_WEIGHT if cells > 0 else 0.0
    return round(difficulty.max_score * (1.0 + time_part + move_part))


def round_result(session: GameSession, difficulty: Difficulty, elapsed_sec: float, timed_out: bool = False) -> RoundResult:
    outcome = outcome_of(session)
    cells = session.board.rows * session.board.cols
    moves = session.move_count
    return RoundResult(
        outcome=outcome,
        difficulty=difficulty.name,
        moves=moves,
        elapsed_sec=elapsed_sec,
        score=score_round(outcome, difficulty, moves, elapsed_sec, cells, timed_out),
        winning_line=session.winning_line,
        timed_out=timed_out,
    )
