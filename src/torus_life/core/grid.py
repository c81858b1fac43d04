"""Toroidal grid data structure for the Game of Life."""

from typing import List, Optional, Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .stream import write_grid


def normalize_rows(rows: Optional[Sequence[Sequence[bool]]]) -> List[np.ndarray]:
    """Pad a ragged matrix of cells into a rectangular one.

    Every row is right-padded with dead cells up to the length of the
    longest row, so the left/right and top/bottom edges can be stitched
    together into a torus.

    Args:
        rows: Sequence of rows, each a sequence of cell states

    Returns:
        List of boolean row arrays of equal length

    Raises:
        ValueError: If rows is None
    """
    if rows is None:
        raise ValueError("Grid rows must not be None")

    if len(rows) == 0:
        return []

    width = max(len(row) for row in rows)

    normalized = []
    for row in rows:
        padded = np.zeros(width, dtype=bool)
        padded[: len(row)] = np.asarray(row, dtype=bool)
        normalized.append(padded)

    return normalized


class TorusGrid:
    """Represents a rectangular grid whose edges wrap around.

    Rows are stored as separate numpy arrays so the evolution engine can
    swap a single row for its next state without copying the whole grid.
    """

    def __init__(self, rows: Optional[Sequence[Sequence[bool]]]) -> None:
        """Initialize a grid from a possibly ragged matrix.

        Args:
            rows: Sequence of rows of cell states (True = live)

        Raises:
            ValueError: If rows is None
        """
        self._rows = normalize_rows(rows)

        # 3x3 neighbourhood kernel, centre excluded
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def empty(cls, width: int, height: int) -> "TorusGrid":
        """Create a grid of dead cells."""
        return cls([[False] * width for _ in range(height)])

    @property
    def rows(self) -> List[np.ndarray]:
        """Get the row list (mutated in place by evolution)."""
        return self._rows

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    def _wrap(self, x: int, y: int) -> Tuple[int, int]:
        if self.width == 0 or self.height == 0:
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds on an empty grid")
        return x % self.width, y % self.height

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate (wraps around)
            y: Row coordinate (wraps around)

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If the grid has no cells
        """
        x, y = self._wrap(x, y)
        return bool(self._rows[y][x])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate (wraps around)
            y: Row coordinate (wraps around)
            alive: Whether the cell should be alive

        Raises:
            IndexError: If the grid has no cells
        """
        x, y = self._wrap(x, y)
        self._rows[y][x] = alive

    def toggle_cell(self, x: int, y: int) -> bool:
        """Toggle the state of a cell and return the new state."""
        new_state = not self.get_cell(x, y)
        self.set_cell(x, y, new_state)
        return new_state

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(sum(np.count_nonzero(row) for row in self._rows))

    def get_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Neighbour positions are counted, not distinct cells: on a torus one
        cell wide or high the same cell may be seen from several positions.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbor positions (0-8)
        """
        count = 0
        for dx in [-1, 0, 1]:
            for dy in [-1, 0, 1]:
                if dx == 0 and dy == 0:
                    continue
                count += self.get_cell(x + dx, y + dy)

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a circular-padded convolution.

        Returns:
            (height, width) array with neighbor counts for each cell
        """
        if self.width == 0 or self.height == 0:
            return np.zeros((self.height, self.width), dtype=np.int8)

        cells = torch.from_numpy(np.stack(self._rows).astype(np.float32))
        padded = F.pad(cells.unsqueeze(0).unsqueeze(0), (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)

        return neighbors[0, 0].numpy().astype(np.int8)

    def to_list(self) -> List[List[bool]]:
        """Convert grid to nested lists of booleans."""
        return [[bool(cell) for cell in row] for row in self._rows]

    def copy(self) -> "TorusGrid":
        """Return an independent grid with the same cells."""
        return TorusGrid(self._rows)

    def __len__(self) -> int:
        return self.height

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, TorusGrid):
            return False
        return self.shape == other.shape and all(
            np.array_equal(mine, theirs) for mine, theirs in zip(self._rows, other._rows)
        )

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '-'."""
        return write_grid(self._rows)
