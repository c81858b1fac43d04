"""Conway's Game of Life on a toroidal grid."""

__version__ = "0.1.0"

from .core.grid import TorusGrid, normalize_rows
from .core.game import GameOfLife, evolve
from .core.stream import read_grid, write_grid

__all__ = ["TorusGrid", "normalize_rows", "GameOfLife", "evolve", "read_grid", "write_grid"]
