"""
Difficulty module for Minesweeper game.

Defines board dimensions and mine count, the named presets,
and the validation that rejects unplayable configurations.
"""
import numbers
from dataclasses import dataclass
from typing import Dict


# ============================================================================
# Errors
# ============================================================================

class InvalidDifficulty(ValueError):
    """Raised when a difficulty cannot produce a playable board."""


# ============================================================================
# Difficulty Data Class
# ============================================================================

# Cells kept mine-free around the first reveal (3x3 block).
FIRST_CLICK_ZONE = 9


@dataclass(frozen=True)
class Difficulty:
    """
    Configuration for a Minesweeper game.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    rows: int = 8
    cols: int = 8
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("rows", "cols", "mines"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidDifficulty(f"{name} must be an integer")
            # Frozen dataclass: store numpy integers as plain ints.
            object.__setattr__(self, name, int(value))
        if self.rows < 1 or self.cols < 1:
            raise InvalidDifficulty("Board dimensions must be positive")
        if self.mines < 1:
            raise InvalidDifficulty("Number of mines must be positive")
        max_mines = self.rows * self.cols - FIRST_CLICK_ZONE - 1
        if self.mines > max_mines:
            raise InvalidDifficulty(
                f"Too many mines for {self.rows}x{self.cols} "
                f"(max {max(max_mines, 0)})"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.mines

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """
        Look up a preset by name.

        Args:
            name: One of "easy", "medium" or "hard" (case-insensitive).

        Returns:
            The matching preset.
        """
        try:
            return PRESETS[name.strip().lower()]
        except (KeyError, AttributeError):
            choices = ", ".join(PRESETS)
            raise InvalidDifficulty(
                f"Unknown difficulty {name!r} (choose from {choices})"
            ) from None


# Preset difficulty levels
EASY = Difficulty(8, 8, 10)
MEDIUM = Difficulty(16, 16, 40)
HARD = Difficulty(16, 30, 99)

PRESETS: Dict[str, Difficulty] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}
