#!/usr/bin/env python3
"""
Example usage of the torus_life package.
"""

from torus_life import TorusGrid, GameOfLife, read_grid, write_grid

GLIDER = """
------
--*---
---**-
--**--
------
"""


def main():
    """Demonstrate programmatic usage of the torus_life package."""
    grid = TorusGrid(read_grid(GLIDER))
    game = GameOfLife(grid)

    print("Initial state:")
    print(write_grid(grid))
    print(f"Population: {game.population}")
    print()

    game.step()

    print(f"Generation {game.generation}:")
    print(grid)
    print(f"Population: {game.population}")
    print()

    print("Neighbor counts:")
    print(grid.count_all_neighbors())


if __name__ == "__main__":
    main()
