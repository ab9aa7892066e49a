"""Basic tests for the termlife package."""

import termlife
from termlife import Grid, GameOfLife, LifeConfig, PatternLibrary


def test_version():
    assert termlife.__version__ == "0.1.0"


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10)
    assert grid.size == 10
    assert grid.get_cell(0, 0) is False

    grid.set_cell(5, 5, True)
    assert grid.get_cell(5, 5) is True


def test_game_creation():
    """Test basic game creation."""
    game = GameOfLife(LifeConfig(size=5))
    assert game.population == 0

    game.grid.set_cell(2, 2, True)
    assert game.population == 1


def test_pattern_library():
    """Test pattern library has some patterns."""
    patterns = PatternLibrary().list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid(5)

    # Vertical line
    grid.set_cell(2, 1, True)
    grid.set_cell(2, 2, True)
    grid.set_cell(2, 3, True)

    grid.next()
    assert grid.num_live() == 3
    assert grid.live_cells() == {(1, 2), (2, 2), (3, 2)}

    grid.next()
    assert grid.live_cells() == {(2, 1), (2, 2), (2, 3)}
