"""Basic tests for the torus_life package."""

from torus_life import GameOfLife, TorusGrid, evolve, read_grid, write_grid


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = TorusGrid.empty(10, 10)
    assert grid.width == 10
    assert grid.height == 10
    assert grid.get_cell(0, 0) is False

    grid.set_cell(5, 5, True)
    assert grid.get_cell(5, 5) is True


def test_game_creation():
    """Test basic game creation."""
    grid = TorusGrid.empty(5, 5)
    game = GameOfLife(grid)
    assert game.population == 0

    grid.set_cell(2, 2, True)
    assert game.population == 1


def test_text_round_trip():
    """Test text in, one generation, text out."""
    grid = TorusGrid(read_grid("-----\n--*--\n--*--\n--*--\n-----"))
    evolve(grid)
    assert write_grid(grid) == "-----\n-----\n-***-\n-----\n-----"
