from __future__ import annotations

import time
from typing import Callable

from gravity_board.ai.pick import agent_for_difficulty, random_ai_agent
from gravity_board.config import BOARD_PRESETS, DEFAULT_DIFFICULTY, DEFAULT_PRESET, DIFFICULTIES, get_difficulty
from gravity_board.game.controller import run_game
from gravity_board.ui.human import HumanAgent


def _ask_preset(input_fn: Callable[[str], str]) -> tuple[int, int, int]:
    names = list(BOARD_PRESETS)
    print("Board:")
    for i, name in enumerate(names, start=1):
        rows, cols, n = BOARD_PRESETS[name]
        print(f"{i}) {name} ({rows}x{cols}, connect {n})")
    raw = input_fn(f"Board (default {DEFAULT_PRESET}): ").strip()
    if raw.isdigit() and 1 <= int(raw) <= len(names):
        return BOARD_PRESETS[names[int(raw) - 1]]
    return BOARD_PRESETS.get(raw.lower(), BOARD_PRESETS[DEFAULT_PRESET])


def run_menu(input_fn: Callable[[str], str] = input) -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs AI (pick difficulty)")
    print("3) Human vs AI (random difficulty)")
    print("4) Run skill league")

    choice = input_fn("Choice: ").strip()

    if choice in {"1", "2", "3"}:
        rows, cols, n = _ask_preset(input_fn)

    if choice == "1":
        p1 = HumanAgent()
        p2 = HumanAgent()
        print(f"\nStarting game: {p1.name} vs {p2.name}")
        print("Game will start in 3 seconds...\n")
        time.sleep(3)
        run_game(p1, p2, rows=rows, cols=cols, win_length=n, input_fn=input_fn)
        return

    if choice == "2":
        raw = input_fn(f"Difficulty ({'/'.join(DIFFICULTIES)}): ").strip() or DEFAULT_DIFFICULTY
        try:
            difficulty = get_difficulty(raw)
        except KeyError as e:
            print(f"{e.args[0]} Using {DEFAULT_DIFFICULTY}.")
            difficulty = get_difficulty(DEFAULT_DIFFICULTY)
        human = HumanAgent()
        ai = agent_for_difficulty(difficulty.name)
        print(f"\nStarting game: {human.name} vs {ai.name}")
        print(f"You have {difficulty.time_limit_sec} seconds. Game will start in 3 seconds...\n")
        time.sleep(3)
        run_game(human, ai, difficulty=difficulty, rows=rows, cols=cols, win_length=n, input_fn=input_fn)
        return

    if choice == "3":
        human = HumanAgent()
        ai, difficulty = random_ai_agent()
        print(f"\nStarting game: {human.name} vs {ai.name}")
        print(f"You have {difficulty.time_limit_sec} seconds. Game will start in 3 seconds...\n")
        time.sleep(3)
        run_game(human, ai, difficulty=difficulty, rows=rows, cols=cols, win_length=n, input_fn=input_fn)
        return

    if choice == "4":
        print("\nStarting skill league in 3 seconds...\n")
        time.sleep(3)
        from gravity_board.scripts.league_main import main as league_main
        league_main([])
        return

    print("\nInvalid choice. Defaulting to Human vs Human.\n")
    time.sleep(3)
    run_game(HumanAgent(), HumanAgent(), input_fn=input_fn)
