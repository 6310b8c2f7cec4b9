"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src (package) and the project root (demo script) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minesweeper import Difficulty, GameEngine, EASY, MEDIUM, HARD


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def default_engine() -> GameEngine:
    """Create an easy 8x8 engine with 10 mines."""
    return GameEngine()


@pytest.fixture
def seeded_engine() -> GameEngine:
    """Create an easy engine with reproducible mine placement."""
    return GameEngine(EASY, rng=random.Random(1234))


@pytest.fixture
def sparse_engine() -> GameEngine:
    """Create a 10x10 board with a single mine for cascade testing."""
    return GameEngine(Difficulty(10, 10, 1), rng=random.Random(7))


@pytest.fixture
def dense_engine() -> GameEngine:
    """Create a 4x4 board with the maximum allowed mines (6)."""
    return GameEngine(Difficulty(4, 4, 6), rng=random.Random(3))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def easy_config() -> Difficulty:
    """Easy difficulty configuration."""
    return EASY


@pytest.fixture
def medium_config() -> Difficulty:
    """Medium difficulty configuration."""
    return MEDIUM


@pytest.fixture
def hard_config() -> Difficulty:
    """Hard difficulty configuration."""
    return HARD
