from __future__ import annotations

import random
from typing import Dict, Tuple

from gravity_board.config import ROWS, COLS, CONNECT_N
from gravity_board.game.engine import apply_move, new_game

from .league_types import Agg, empty_reasons

SideStats = Dict[str, object]


def seed_agent(agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if rng is not None:
        rng.seed(seed)


def _new_side_stats() -> SideStats:
    return {"moves": 0, "time_ms": 0, "reasons": empty_reasons()}


def play_headless(
    agent_x,
    agent_o,
    seed_base: int = 0,
    rows: int = ROWS,
    cols: int = COLS,
    win_length: int = CONNECT_N,
    opening_plies: int = 2,
) -> Tuple[str, Dict[str, SideStats]]:
    """
    Headless game loop.
    Returns outcome: "X", "O", or "D", and per-side move stats: {"X": {...}, "O": {...}}.
    The first ``opening_plies`` moves are random so repeated pairings diverge.
    """
    session = new_game(rows, cols, win_length)
    stats = {"X": _new_side_stats(), "O": _new_side_stats()}

    seed_agent(agent_x, seed_base + 101)
    seed_agent(agent_o, seed_base + 202)

    rng = random.Random(seed_base)
    for _ in range(opening_plies):
        if session.is_over:
            break
        apply_move(session, int(rng.choice(session.board.valid_moves())))

    while not session.is_over:
        side = session.current
        agent = agent_x if side == "X" else agent_o
        move = agent.choose_move(session)

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[side]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        reason = info.get("reason")
        if reason in side_stats["reasons"]:
            side_stats["reasons"][reason] += 1

        apply_move(session, int(move))

    if session.status == "draw":
        return "D", stats
    return session.winner, stats


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_x: bool) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome == "D":
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == "X" and a_is_x) or (outcome == "O" and not a_is_x)
    if a_won:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def add_side_stats(agg: Agg, side_stats: SideStats) -> None:
    agg.moves += int(side_stats["moves"])
    agg.time_ms += int(side_stats["time_ms"])
    for reason, n in side_stats["reasons"].items():
        agg.reasons[reason] = agg.reasons.get(reason, 0) + int(n)


def run_pairings_batch(args):
    (batch_items, games_per_pair, rows, cols, win_length) = args
    out = []
    for (A_name, B_name, A_make, B_make, base_seed) in batch_items:
        for g in range(games_per_pair):
            # alternate colours so neither team always moves first
            if g % 2 == 0:
                outcome, stats = play_headless(A_make(), B_make(), base_seed + g, rows, cols, win_length)
                out.append((A_name, B_name, True, outcome, stats))
            else:
                outcome, stats = play_headless(B_make(), A_make(), base_seed + g, rows, cols, win_length)
                out.append((A_name, B_name, False, outcome, stats))
    return out


def chunked(lst, size: int):
    for i in range(0, len(lst), size):
        yield lst[i : i + size]
