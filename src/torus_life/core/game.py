"""Conway's Game of Life evolution on a torus."""

from typing import Dict, MutableSequence, Sequence, Tuple, Union
import numpy as np

from .grid import TorusGrid


RowList = MutableSequence[np.ndarray]


def neighbour_rows(rows: Sequence[np.ndarray], index: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Get the preceding row, the row at index and the following row.

    The first row is preceded by the last one and the last row is followed
    by the first one. A single-row grid is its own predecessor and successor.
    """
    row_count = len(rows)
    return rows[(index - 1) % row_count], rows[index], rows[(index + 1) % row_count]


def column_live_counts(rows: Sequence[np.ndarray]) -> np.ndarray:
    """Count live cells per column across the three neighbour rows (0-3)."""
    preceding, current, following = rows
    return preceding.astype(np.int8) + current + following


def row_live_neighbors(column_counts: np.ndarray, row: np.ndarray) -> np.ndarray:
    """Combine column counts into 8-neighbour counts for every cell of a row.

    Each cell sees the columns to its left and right (wrapping around) plus
    its own column, minus itself.
    """
    return np.roll(column_counts, 1) + column_counts + np.roll(column_counts, -1) - row.astype(np.int8)


def next_row_state(row: np.ndarray, live_neighbors: np.ndarray) -> np.ndarray:
    """Apply the B3/S23 rule to a row.

    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """
    return (live_neighbors == 3) | (row & (live_neighbors == 2))


def evolve(grid: Union[TorusGrid, RowList]) -> None:
    """Advance a grid by one generation in place.

    Instead of allocating a second grid, next states are held in row
    buffers and a row is only overwritten once no remaining row needs its
    old state as a neighbour. Row 0 is written back last since the final
    row still reads it.

    Args:
        grid: TorusGrid or list of equal-length boolean row arrays

    Raises:
        ValueError: If grid is None
    """
    if grid is None:
        raise ValueError("Grid must not be None")

    rows = grid.rows if isinstance(grid, TorusGrid) else grid
    height = len(rows)
    if height == 0:
        return

    next_first_row = None
    next_previous_row = None
    next_current_row = None

    for i in range(height):
        next_previous_row = next_current_row

        row = rows[i]
        column_counts = column_live_counts(neighbour_rows(rows, i))
        next_current_row = next_row_state(row, row_live_neighbors(column_counts, row))

        # Row i-1 is no longer anybody's neighbour source
        if next_previous_row is not None:
            rows[i - 1] = next_previous_row

        if i == 0:
            next_first_row = next_current_row
            next_current_row = None

        if i == height - 1:
            if next_current_row is not None:
                rows[i] = next_current_row
            rows[0] = next_first_row


class GameOfLife:
    """Single-step Game of Life session on a toroidal grid."""

    def __init__(self, grid: TorusGrid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The toroidal grid to evolve

        Raises:
            ValueError: If grid is None
        """
        if grid is None:
            raise ValueError("Grid must not be None")

        self.grid = grid
        self._generation = 0

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def step(self) -> None:
        """Advance the simulation by one generation."""
        evolve(self.grid)
        self._generation += 1

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and grid size
        """
        cell_count = self.grid.width * self.grid.height

        return {
            "generation": self._generation,
            "population": self.population,
            "grid_size": self.grid.shape,
            "population_density": self.population / cell_count if cell_count else 0.0,
        }
