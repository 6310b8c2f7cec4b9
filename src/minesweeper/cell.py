"""
Cell module for Minesweeper game.

Read-only view of a single grid position: its content (mine/number)
and its visual state (hidden/revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

# Grid value marking a mine; any other value is an adjacency count 0-8.
MINE = -1

# Observation encoding shared with GameEngine.get_observation().
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Snapshot of one cell on the Minesweeper grid.

    Attributes:
        value: MINE, or count of mines in neighboring cells (0-8).
        revealed: Whether the cell has been revealed.
        flagged: Whether the cell carries a flag.
    """

    value: int = 0
    revealed: bool = False
    flagged: bool = False

    @property
    def is_mine(self) -> bool:
        return self.value == MINE

    @property
    def adjacent_mines(self) -> int:
        """Adjacency count, or 0 for a mine."""
        return 0 if self.is_mine else self.value

    @property
    def state(self) -> CellState:
        # Mines revealed at game end may still carry the player's flag.
        if self.revealed:
            return CellState.REVEALED
        if self.flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to its observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        state = self.state
        if state == CellState.HIDDEN:
            return OBS_HIDDEN
        if state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.is_mine:
            return OBS_MINE
        return self.value
