from __future__ import annotations
import sys
import time

from gravity_board.config import AI_THINKING_SPINNER


def ai_thinking(label: str = "AI is thinking", delay_sec: float = 1.0) -> None:
    """
    Small user-visible delay + optional spinner so AI moves are not instant.
    """
    if delay_sec <= 0:
        return

    if not AI_THINKING_SPINNER:
        time.sleep(delay_sec)
        return

    frames = ["|", "/", "-", "\\"]
    start = time.time()
    i = 0
    while (time.time() - start) < delay_sec:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
