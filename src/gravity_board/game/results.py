from __future__ import annotations

from gravity_board.game.state import GameSession
from gravity_board.types import Outcome, Player, PLAYER


def outcome_of(session: GameSession, side: Player = PLAYER) -> Outcome:
    """Result of a finished round from ``side``'s point of view."""
    if session.status == "draw":
        return "draw"
    if session.status == "won":
        return "win" if session.winner == side else "loss"
    raise ValueError(f"Round is not finished (status={session.status}).")


def banner(session: GameSession) -> str:
    if session.status == "won":
        return f"Player {session.winner} wins!"
    if session.status == "draw":
        return "Draw game."
    return f"Player {session.current}'s turn."
