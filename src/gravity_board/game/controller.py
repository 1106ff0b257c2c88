from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from gravity_board.ai.base import Agent
from gravity_board.config import ROWS, COLS, CONNECT_N, Difficulty
from gravity_board.errors import MoveError
from gravity_board.game.engine import apply_move, new_game
from gravity_board.game.results import banner
from gravity_board.game.scoring import RoundResult, round_result
from gravity_board.game.state import GameSession
from gravity_board.types import Player, OPPONENT
from gravity_board.ui.effects import ai_thinking
from gravity_board.ui.prompts import parse_move
from gravity_board.ui.render import render

logger = logging.getLogger(__name__)


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_x: Agent, agent_o: Agent, session: GameSession) -> str:
    """
    Prepend a persistent header showing who X and O are.
    """
    x_name = _agent_name(agent_x, "Player X")
    o_name = _agent_name(agent_o, "Player O")

    header = f"X: {x_name} | O: {o_name} | Turn: {session.current} | Moves: {session.move_count}"
    if status:
        return f"{header}\n{status}"
    return header


def timed_out(session: GameSession, winner: Player = OPPONENT) -> GameSession:
    """
    The round clock ran out: hand back a finished copy of the session.
    The original session is not modified.
    """
    forced = session.copy()
    forced.status = "won"
    forced.winner = winner
    forced.winning_line = None
    forced.last_status = "Time is up."
    return forced


def run_game(
    agent_x: Agent,
    agent_o: Agent,
    difficulty: Optional[Difficulty] = None,
    show_thinking: bool = True,
    rows: int = ROWS,
    cols: int = COLS,
    win_length: int = CONNECT_N,
    input_fn: Callable[[str], str] = input,
    clock: Callable[[], float] = time.perf_counter,
) -> Optional[RoundResult]:
    """
    Interactive round. With a difficulty the round is timed and scored from
    X's point of view; returns None when the round was quit or untimed.
    """
    session = new_game(rows, cols, win_length)
    start = clock()
    limit = float(difficulty.time_limit_sec) if difficulty else None
    expired = False
    logger.info("Round started: %s vs %s on %dx%d (connect %d)",
                _agent_name(agent_x, "X"), _agent_name(agent_o, "O"), rows, cols, win_length)

    def draw(status: str) -> None:
        render(
            session.board,
            _status_with_agents(status, agent_x, agent_o, session),
            highlight=session.winning_line,
            win_length=session.win_length,
        )

    while True:
        elapsed = clock() - start
        if limit is not None and not session.is_over and elapsed >= limit:
            logger.info("Round clock expired after %.1fs", elapsed)
            session = timed_out(session)
            expired = True

        if session.is_over:
            msg = banner(session)
            if expired:
                msg = f"Time is up. {msg}"
            draw(msg)
            logger.info("Round finished: %s after %d moves", banner(session), session.move_count)
            if difficulty is None:
                return None
            result = round_result(session, difficulty, elapsed, timed_out=expired)
            print(f"Result: {result.outcome} | Score: {result.score}")
            return result

        if limit is not None:
            draw(f"{session.last_status} | Time left: {max(0, int(limit - elapsed))}s")
        else:
            draw(session.last_status)

        current_agent = agent_x if session.current == "X" else agent_o

        try:
            if current_agent.name == "Human":
                raw = input_fn(f"Player {session.current} move: ")
                move = parse_move(raw, session.board.cols)
                if move is None:
                    draw("Game quit.")
                    logger.info("Round quit after %d moves", session.move_count)
                    return None
                session.last_status = f"Player {session.current} chose {int(move) + 1}"

            else:
                if show_thinking:
                    ai_thinking(f"{current_agent.name}", difficulty.ai_delay_sec if difficulty else 1.0)

                move = current_agent.choose_move(session)

                info = getattr(current_agent, "last_info", None)
                if info and info.get("reason"):
                    session.last_status = f"{current_agent.name} chose {int(move) + 1} ({info['reason']})"
                else:
                    session.last_status = f"{current_agent.name} chose {int(move) + 1}"

            if limit is not None and clock() - start >= limit:
                # the move came in after the bell
                continue

            mover = session.current
            apply_move(session, int(move))
            if not session.is_over:
                session.last_status += f" | Next: Player {session.current}"
            logger.debug("Player %s dropped into column %d", mover, int(move))

        except MoveError as e:
            logger.debug("Rejected move: %s", e)
            session.last_status = str(e)
        except ValueError as e:
            session.last_status = str(e)
