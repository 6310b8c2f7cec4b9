"""
Snapshot module for Minesweeper game.

Frozen copy of the engine state for a presentation layer, with a
plain-text rendering of the board.
"""
from dataclasses import dataclass
from typing import List

import numpy as np

from .cell import OBS_FLAGGED, OBS_HIDDEN, OBS_MINE
from .engine import GameEngine, GameStatus


_SYMBOLS = {
    OBS_HIDDEN: ".",
    OBS_FLAGGED: "F",
    OBS_MINE: "*",
    0: " ",
}


def _cell_symbol(value: int) -> str:
    """Display character for one observation value."""
    return _SYMBOLS.get(value, str(value))


# ============================================================================
# Game Snapshot
# ============================================================================

@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """
    Read-only view of a game at one point in time.

    Arrays are copies, so later engine calls never change a snapshot
    already handed out. Values of hidden cells are not included.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines in the game.
        status: Game status when the snapshot was taken.
        elapsed: Seconds counted since the first reveal.
        flag_count: Flags currently placed.
        remaining_mines: mine_count - flag_count, possibly negative.
        revealed_count: Revealed non-mine cells.
        observation: int8 board (-1 hidden, -2 flag, 0-8, 9 mine).
        revealed: Boolean reveal mask.
        flagged: Boolean flag mask.
    """

    rows: int
    cols: int
    mine_count: int
    status: GameStatus
    elapsed: int
    flag_count: int
    remaining_mines: int
    revealed_count: int
    observation: np.ndarray
    revealed: np.ndarray
    flagged: np.ndarray

    @classmethod
    def from_engine(cls, engine: GameEngine) -> "GameSnapshot":
        """Copy the displayable state out of an engine."""
        observation = engine.get_observation()
        observation.setflags(write=False)
        revealed = engine.revealed_mask
        revealed.setflags(write=False)
        flagged = engine.flag_mask
        flagged.setflags(write=False)
        return cls(
            rows=engine.rows,
            cols=engine.cols,
            mine_count=engine.mine_count,
            status=engine.status,
            elapsed=engine.elapsed,
            flag_count=engine.flag_count,
            remaining_mines=engine.remaining_mines,
            revealed_count=engine.revealed_count,
            observation=observation,
            revealed=revealed,
            flagged=flagged,
        )

    def render(self) -> str:
        """Render the board as text, one character and a space per cell."""
        return "\n".join(
            "".join(_cell_symbol(int(value)) + " " for value in row)
            for row in self.observation
        )

    def render_with_axes(self) -> str:
        """Render board with row and column indices for a terminal player."""
        width = len(str(max(self.rows, self.cols) - 1))
        header = " " * (width + 1) + " ".join(
            str(col % 10) for col in range(self.cols)
        )
        lines: List[str] = [header]
        for row, line in enumerate(self.render().split("\n")):
            lines.append(f"{row:>{width}} {line}")
        return "\n".join(lines)

    def status_line(self) -> str:
        """One-line summary: mines left and time, or the final result."""
        if self.status == GameStatus.WON:
            return f"You won! Time: {self.elapsed}s"
        if self.status == GameStatus.LOST:
            return "Game over! You hit a mine."
        return f"Mines left: {self.remaining_mines}  Time: {self.elapsed}s"
