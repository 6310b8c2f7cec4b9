"""
Unit tests for CellView.

Tests derived cell state and observation conversion.
"""
import pytest
from minesweeper import CellState, CellView, MINE


# ============================================================================
# Cell State Tests
# ============================================================================

class TestCellState:
    """Test state derived from reveal and flag bits."""

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = CellView()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_flagged_cell(self) -> None:
        """Flag bit on an unrevealed cell gives FLAGGED."""
        cell = CellView(flagged=True)
        assert cell.state == CellState.FLAGGED
        assert cell.is_flagged is True

    def test_revealed_wins_over_flag(self) -> None:
        """A flagged mine revealed at game end shows as revealed."""
        cell = CellView(value=MINE, revealed=True, flagged=True)
        assert cell.state == CellState.REVEALED
        assert cell.is_flagged is False

    def test_mine_has_no_adjacent_count(self) -> None:
        """Mines report zero adjacent mines."""
        cell = CellView(value=MINE)
        assert cell.is_mine is True
        assert cell.adjacent_mines == 0

    def test_number_cell(self) -> None:
        """Number cells expose their count."""
        cell = CellView(value=5)
        assert cell.is_mine is False
        assert cell.adjacent_mines == 5

    def test_cell_is_immutable(self) -> None:
        """Views cannot be used to change the grid."""
        cell = CellView()
        with pytest.raises(AttributeError):
            cell.revealed = True


# ============================================================================
# Observation Tests
# ============================================================================

class TestCellObservation:
    """Test observation value conversion."""

    def test_hidden_observation(self) -> None:
        """Hidden cell observes as -1, even over a mine."""
        assert CellView(value=MINE).to_observation() == -1

    def test_flagged_observation(self) -> None:
        """Flagged cell observes as -2."""
        assert CellView(value=3, flagged=True).to_observation() == -2

    def test_revealed_number_observation(self) -> None:
        """Revealed number observes as its count."""
        assert CellView(value=3, revealed=True).to_observation() == 3

    def test_revealed_mine_observation(self) -> None:
        """Revealed mine observes as 9."""
        assert CellView(value=MINE, revealed=True).to_observation() == 9
