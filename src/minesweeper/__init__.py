"""
Minesweeper game module.

Provides the game-state engine: difficulty configuration, grid and
cell state, reveal/flag rules and read-only snapshots for display.
"""
from .cell import CellState, CellView, MINE
from .difficulty import Difficulty, InvalidDifficulty, EASY, MEDIUM, HARD, PRESETS
from .engine import GameEngine, GameStatus, RevealOutcome
from .snapshot import GameSnapshot

__all__ = [
    "CellState",
    "CellView",
    "MINE",
    "Difficulty",
    "InvalidDifficulty",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "GameEngine",
    "GameStatus",
    "RevealOutcome",
    "GameSnapshot",
]
