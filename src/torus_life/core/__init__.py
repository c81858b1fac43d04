"""Core toroidal Game of Life logic."""

from .grid import TorusGrid, normalize_rows
from .game import GameOfLife, evolve
from .stream import read_grid, write_grid, load_grid

__all__ = ["TorusGrid", "normalize_rows", "GameOfLife", "evolve", "read_grid", "write_grid", "load_grid"]
