#!/usr/bin/env python3
"""
Play Minesweeper in the terminal.

Usage:
    python demo.py [--difficulty {easy,medium,hard}] [--seed N] [--verbose]

Commands:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    t           advance the timer by one second
    n           start a new game
    q           quit
"""
import argparse
import logging
import random
import sys
import time
from typing import Optional, Tuple

from src.minesweeper import Difficulty, GameEngine, InvalidDifficulty, PRESETS


class CommandError(ValueError):
    """Raised for input the demo cannot interpret."""


def parse_command(line: str) -> Tuple[str, Optional[int], Optional[int]]:
    """
    Parse one line of player input.

    Args:
        line: Raw input such as "r 3 4" or "q".

    Returns:
        Tuple of (action, row, col); row and col are None for
        actions without coordinates.
    """
    parts = line.split()
    if not parts:
        raise CommandError("Empty command")

    action = parts[0].lower()
    if action in ("q", "n", "t"):
        if len(parts) != 1:
            raise CommandError(f"'{action}' takes no arguments")
        return action, None, None

    if action not in ("r", "f"):
        raise CommandError(f"Unknown command: {parts[0]}")
    if len(parts) != 3:
        raise CommandError(f"Usage: {action} ROW COL")
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        raise CommandError("ROW and COL must be integers") from None
    return action, row, col


def play(difficulty: Difficulty, seed: Optional[int] = None) -> None:
    """Run an interactive game loop on stdin/stdout."""
    engine = GameEngine(difficulty, rng=random.Random(seed))
    last_tick = time.monotonic()

    while True:
        # Credit wall-clock seconds since the last command to the timer.
        now = time.monotonic()
        for _ in range(int(now - last_tick)):
            engine.tick()
        last_tick += int(now - last_tick)

        snapshot = engine.snapshot()
        print()
        print(snapshot.render_with_axes())
        print(snapshot.status_line())

        try:
            line = input("> ")
        except EOFError:
            return

        try:
            action, row, col = parse_command(line)
        except CommandError as error:
            print(error)
            continue

        if action == "q":
            return
        if action == "n":
            engine.reset()
            last_tick = time.monotonic()
        elif action == "t":
            engine.tick()
        elif action == "r":
            engine.reveal(row, col)
        elif action == "f":
            engine.toggle_flag(row, col)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--difficulty", default="easy", choices=sorted(PRESETS), help="Preset board size")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for mine placement")
    parser.add_argument("--verbose", action="store_true", help="Log engine events")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        chosen = Difficulty.from_name(args.difficulty)
    except InvalidDifficulty as error:
        print(error)
        sys.exit(2)

    play(chosen, seed=args.seed)
