"""
Game engine module for Minesweeper.

Implements the grid with deferred mine placement, cell revealing
with flood fill, flagging, the elapsed-time counter and game state
management. Presentation layers drive it through plain method calls
and read its state back after each one.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

import numpy as np

from .cell import CellView, MINE, OBS_FLAGGED, OBS_HIDDEN, OBS_MINE
from .difficulty import Difficulty, EASY, InvalidDifficulty

if TYPE_CHECKING:
    from .snapshot import GameSnapshot

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class RevealOutcome(Enum):
    """Result of a single reveal call."""

    NOOP = auto()
    REVEALED = auto()
    WON = auto()
    LOST = auto()


NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)

# Random draws tried before placement switches to sampling the
# explicit list of eligible cells.
MIN_PLACEMENT_DRAWS = 1000
PLACEMENT_DRAWS_PER_CELL = 20

DifficultyLike = Union[Difficulty, Sequence[int]]


def _as_difficulty(difficulty: Optional[DifficultyLike]) -> Difficulty:
    """Accept a Difficulty or a (rows, cols, mines) triple."""
    if difficulty is None:
        return EASY
    if isinstance(difficulty, Difficulty):
        return difficulty
    try:
        rows, cols, mines = difficulty
    except (TypeError, ValueError):
        raise InvalidDifficulty(
            f"Expected (rows, cols, mines), got {difficulty!r}"
        ) from None
    return Difficulty(rows, cols, mines)


# ============================================================================
# Game Engine Class
# ============================================================================

@dataclass(eq=False)
class GameEngine:
    """
    Minesweeper game engine.

    Owns the grid, reveal and flag masks, game status and elapsed
    time. Mines are placed on the first reveal, never within one cell
    (diagonals included) of the revealed position.
    """

    difficulty: DifficultyLike = field(default_factory=lambda: EASY)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: np.ndarray = field(init=False, repr=False)
    _revealed: np.ndarray = field(init=False, repr=False)
    _flagged: np.ndarray = field(init=False, repr=False)
    _status: GameStatus = field(init=False, default=GameStatus.IN_PROGRESS)
    _mines_placed: bool = field(init=False, default=False)
    _timer_running: bool = field(init=False, default=False)
    _elapsed: int = field(init=False, default=0)
    _cells_revealed: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Validate the difficulty and build an empty grid."""
        self.difficulty = _as_difficulty(self.difficulty)
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid and masks, and clear per-game state."""
        shape = (self.difficulty.rows, self.difficulty.cols)
        self._grid = np.zeros(shape, dtype=np.int8)
        self._revealed = np.zeros(shape, dtype=bool)
        self._flagged = np.zeros(shape, dtype=bool)
        self._status = GameStatus.IN_PROGRESS
        self._mines_placed = False
        self._timer_running = False
        self._elapsed = 0
        self._cells_revealed = 0

    def _place_mines(self, exclude_row: int, exclude_col: int) -> None:
        """
        Place mines randomly, keeping the 3x3 block around a cell clear.

        Uniform rejection sampling: draw random cells and keep those that
        are outside the exclusion zone and not already mines. Termination
        is probabilistic, so after a fixed number of draws the remaining
        mines are sampled from the explicit list of eligible cells. The
        difficulty invariant guarantees that list is long enough.

        Args:
            exclude_row: Row of the first revealed cell.
            exclude_col: Column of the first revealed cell.
        """
        rows, cols = self.rows, self.cols
        target = self.difficulty.mines
        budget = max(MIN_PLACEMENT_DRAWS, PLACEMENT_DRAWS_PER_CELL * rows * cols)

        placed = 0
        draws = 0
        while placed < target and draws < budget:
            draws += 1
            row = self.rng.randrange(rows)
            col = self.rng.randrange(cols)
            if self._is_excluded(row, col, exclude_row, exclude_col):
                continue
            if self._grid[row, col] == MINE:
                continue
            self._set_mine(row, col)
            placed += 1

        if placed < target:
            logger.debug(
                "Rejection sampling placed %d/%d mines in %d draws, "
                "sampling the rest", placed, target, draws,
            )
            candidates = [
                (row, col)
                for row in range(rows)
                for col in range(cols)
                if self._grid[row, col] != MINE
                and not self._is_excluded(row, col, exclude_row, exclude_col)
            ]
            for row, col in self.rng.sample(candidates, target - placed):
                self._set_mine(row, col)

        self._mines_placed = True
        logger.debug(
            "Placed %d mines on %dx%d board avoiding (%d, %d)",
            target, rows, cols, exclude_row, exclude_col,
        )

    @staticmethod
    def _is_excluded(
        row: int, col: int, exclude_row: int, exclude_col: int
    ) -> bool:
        """Check if a cell lies within Chebyshev distance 1 of the exclusion center."""
        return abs(row - exclude_row) <= 1 and abs(col - exclude_col) <= 1

    def _set_mine(self, row: int, col: int) -> None:
        """Mark a mine and bump the count of its non-mine neighbors."""
        self._grid[row, col] = MINE
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row, neighbor_col] != MINE:
                self._grid[neighbor_row, neighbor_col] += 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self._is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is an integer pair within board bounds."""
        for value in (row, col):
            if isinstance(value, (bool, np.bool_)):
                return False
            if not isinstance(value, (int, np.integer)):
                return False
        return 0 <= row < self.rows and 0 <= col < self.cols

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        On the first reveal of a game, places mines around (never next to)
        this cell and starts the timer. A cell with no adjacent mines
        opens its whole connected empty region and the numbered border.
        Revealing a mine loses the game.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            NOOP if nothing changed, LOST if a mine was hit, WON if this
            reveal uncovered the last safe cell, REVEALED otherwise.
        """
        if not self._can_reveal(row, col):
            return RevealOutcome.NOOP

        if not self._mines_placed:
            self._handle_first_click(row, col)

        if self._grid[row, col] == MINE:
            self._revealed[row, col] = True
            self.end_game(won=False)
            return RevealOutcome.LOST

        self._flood_reveal(row, col)

        if self._check_win_condition():
            self.end_game(won=True)
            return RevealOutcome.WON
        return RevealOutcome.REVEALED

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self._status != GameStatus.IN_PROGRESS:
            return False
        if not self._is_valid_position(row, col):
            return False
        return not (self._revealed[row, col] or self._flagged[row, col])

    def _handle_first_click(self, row: int, col: int) -> None:
        """Handle first click: place mines and start the timer."""
        self._place_mines(row, col)
        self._timer_running = True

    def _flood_reveal(self, row: int, col: int) -> None:
        """
        Reveal a safe cell, cascading through zero-count cells.

        Uses an explicit stack; the reveal mask doubles as the visited
        set. Flagged cells stay closed.
        """
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            if self._revealed[current_row, current_col]:
                continue
            if self._flagged[current_row, current_col]:
                continue

            self._revealed[current_row, current_col] = True
            self._cells_revealed += 1

            if self._grid[current_row, current_col] != 0:
                continue
            for neighbor in self._get_neighbors(current_row, current_col):
                if not self._revealed[neighbor]:
                    stack.append(neighbor)

    def _check_win_condition(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return self._cells_revealed == self.difficulty.safe_cells

    def end_game(self, won: bool) -> None:
        """
        Finish the game and expose every mine.

        Sets the terminal status, stops the timer and reveals all mines,
        whether the game was won or lost. Does nothing once the game has
        already ended, and a win is refused until every safe cell is
        revealed.

        Args:
            won: True for a win, False for a loss.
        """
        if self._status != GameStatus.IN_PROGRESS:
            return
        if won and not self._check_win_condition():
            return
        self._status = GameStatus.WON if won else GameStatus.LOST
        self._timer_running = False
        self._revealed |= self._grid == MINE
        logger.info(
            "Game %s after %d seconds", "won" if won else "lost", self._elapsed
        )

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._status != GameStatus.IN_PROGRESS:
            return False
        if not self._is_valid_position(row, col):
            return False
        if self._revealed[row, col]:
            return False
        self._flagged[row, col] = not self._flagged[row, col]
        return True

    def tick(self) -> int:
        """
        Advance the elapsed-time counter by one second.

        Only counts while the timer runs: after the first reveal and
        before the game ends.

        Returns:
            Elapsed seconds after the tick.
        """
        if self._timer_running and self._status == GameStatus.IN_PROGRESS:
            self._elapsed += 1
        return self._elapsed

    def reset(self, difficulty: Optional[DifficultyLike] = None) -> None:
        """
        Reset engine to initial state for a new game.

        Args:
            difficulty: New difficulty, or None to keep the current one.
        """
        if difficulty is not None:
            self.difficulty = _as_difficulty(difficulty)
        self._init_grid()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.difficulty.rows

    @property
    def cols(self) -> int:
        return self.difficulty.cols

    @property
    def mine_count(self) -> int:
        return self.difficulty.mines

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameStatus.LOST

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    @property
    def elapsed(self) -> int:
        """Seconds counted since the first reveal."""
        return self._elapsed

    @property
    def revealed_count(self) -> int:
        """Number of revealed non-mine cells."""
        return self._cells_revealed

    @property
    def flag_count(self) -> int:
        return int(self._flagged.sum())

    @property
    def remaining_mines(self) -> int:
        """Mine count minus flags placed; negative when over-flagged."""
        return self.mine_count - self.flag_count

    @property
    def revealed_mask(self) -> np.ndarray:
        """Copy of the boolean reveal mask."""
        return self._revealed.copy()

    @property
    def flag_mask(self) -> np.ndarray:
        """Copy of the boolean flag mask."""
        return self._flagged.copy()

    def get_cell(self, row: int, col: int) -> Optional[CellView]:
        """
        Get cell at position, or None if invalid.

        Full-knowledge accessor for tests and debugging: the value of a
        hidden cell is included. Displays should read snapshot() instead,
        which never exposes hidden values.
        """
        if not self._is_valid_position(row, col):
            return None
        return CellView(
            value=int(self._grid[row, col]),
            revealed=bool(self._revealed[row, col]),
            flagged=bool(self._flagged[row, col]),
        )

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.full(self._grid.shape, OBS_HIDDEN, dtype=np.int8)
        obs[self._flagged] = OBS_FLAGGED
        obs[self._revealed] = self._grid[self._revealed]
        obs[self._revealed & (self._grid == MINE)] = OBS_MINE
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells a reveal would act on.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        if self._status != GameStatus.IN_PROGRESS:
            return []
        rows, cols = np.nonzero(~(self._revealed | self._flagged))
        return [(int(row), int(col)) for row, col in zip(rows, cols)]

    def snapshot(self) -> "GameSnapshot":
        """Capture a read-only copy of everything a display needs."""
        from .snapshot import GameSnapshot

        return GameSnapshot.from_engine(self)
